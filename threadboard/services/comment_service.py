from flask import current_app

from threadboard.db import db
from threadboard.errors import NotFoundError, PermissionDeniedError
from threadboard.pagination.page_info import build_page_info, finalize_edges
from threadboard.pagination.range_query import build_comment_range
from threadboard.pagination.tree import reassemble_comments
from threadboard.repositories import comment_repository
from threadboard.repositories import post_repository
from threadboard.repositories import user_repository


def _clean_body(body):
    if not isinstance(body, str) or not body.strip():
        raise ValueError("Comment body is required")

    body = body.strip()
    max_length = current_app.config.get("COMMENT_BODY_MAX_LENGTH", 2000)
    if len(body) > max_length:
        raise ValueError(f"Comment body must be at most {max_length} characters")
    return body


def add_comment(author_id, post_id, body, parent_id=None):
    body = _clean_body(body)

    if not user_repository.get_by_id(author_id):
        raise NotFoundError("User not found")

    post = post_repository.get_post_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    if not comment_repository.is_comments_allowed(post_id):
        raise PermissionDeniedError("Comments are disabled for this post")

    if parent_id is not None:
        if isinstance(parent_id, bool) or not isinstance(parent_id, int):
            raise ValueError("Invalid parent comment")
        parent = comment_repository.get_comment_by_id(parent_id)
        if not parent or parent.post_id != post_id:
            raise ValueError("Invalid parent comment")

    comment = comment_repository.create_comment(
        author_id=author_id,
        post_id=post_id,
        body=body,
        parent_id=parent_id
    )

    db.session.commit()
    return comment


def get_comment(comment_id):
    comment = comment_repository.get_comment_by_id(comment_id)
    if not comment:
        raise NotFoundError("Comment not found")
    return comment


def _get_own_comment(user_id, comment_id):
    comment = get_comment(comment_id)
    if comment.author_id != user_id:
        raise PermissionDeniedError("You can only change your own comments")
    return comment


def edit_comment(user_id, comment_id, body):
    body = _clean_body(body)
    comment = _get_own_comment(user_id, comment_id)
    comment_repository.update_comment(comment, body)
    db.session.commit()
    return comment


def remove_comment(user_id, comment_id):
    comment = _get_own_comment(user_id, comment_id)
    comment_repository.delete_comment(comment)
    db.session.commit()


def fetch_comment_page(post_id, first=None, last=None, after=None, before=None,
                       fetch_rows=None):
    """Fetch one Relay-style page of comments for ``post_id``.

    Bounds and cursors are validated before storage is touched. The page is
    read with a single fetch that asks for one row more than requested, so
    ``has_next_page``/``has_prev_page`` need no second query. Edges always
    come back oldest first; replies whose parent is on the same page are
    also nested under that parent's ``replies``.
    """
    query = build_comment_range(
        post_id,
        first=first,
        last=last,
        after=after,
        before=before,
    )

    if fetch_rows is None:
        fetch_rows = comment_repository.fetch_comment_rows

    rows = fetch_rows(query.with_overfetch())

    edges, has_more = reassemble_comments(rows, query.limit)
    page_info = build_page_info(edges, has_more, query)

    return {
        "edges": finalize_edges(edges, query),
        "page_info": page_info
    }
