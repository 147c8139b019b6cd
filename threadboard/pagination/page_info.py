def build_page_info(edges, has_more, query):
    """Page boundary metadata for ``edges`` as fetched (before any reversal)."""
    return {
        "start_cursor": edges[0]["cursor"] if edges else None,
        "end_cursor": edges[-1]["cursor"] if edges else None,
        "has_next_page": query.is_forward and has_more,
        "has_prev_page": query.is_backward and has_more,
    }


def finalize_edges(edges, query):
    # backward pages are fetched newest first
    if query.is_backward:
        return list(reversed(edges))
    return list(edges)
