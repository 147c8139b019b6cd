from threadboard.pagination.cursor import encode_cursor


def serialize_comment(comment):
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "author_id": comment.author_id,
        "parent_id": comment.parent_id,
        "body": comment.body,
        "created_at": comment.created_at,
        "replies": []
    }


def reassemble_comments(rows, bound=None):
    """Turn one page of flat comment rows into edges with replies attached.

    Rows are consumed once, in the order given. At most ``bound`` rows become
    edges; a row past the bound only reports that more data exists. A reply
    is appended to its parent's ``replies`` when the parent is in the same
    window and is always kept as an edge of its own as well.

    Returns ``(edges, has_more)``.
    """
    edges = []
    comment_map = {}
    has_more = False

    for row in rows:
        if bound is not None and len(edges) == bound:
            has_more = True
            break

        node = serialize_comment(row)
        edges.append({
            "cursor": encode_cursor(row.created_at),
            "node": node
        })
        comment_map[node["id"]] = node

        pid = node["parent_id"]
        if pid is not None:
            parent = comment_map.get(pid)
            if parent is not None:
                parent["replies"].append(node)

    return edges, has_more
