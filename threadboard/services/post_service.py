from flask import current_app

from threadboard.db import db
from threadboard.errors import NotFoundError, PermissionDeniedError
from threadboard.repositories import post_repository
from threadboard.repositories import user_repository


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def _clean_title(title):
    if not _require_non_empty_string(title):
        raise ValueError("Post title is required")

    title = title.strip()
    max_length = current_app.config.get("POST_TITLE_MAX_LENGTH", 200)
    if len(title) > max_length:
        raise ValueError(f"Post title must be at most {max_length} characters")
    return title


def _clean_body(body):
    if not _require_non_empty_string(body):
        raise ValueError("Post body is required")
    return body.strip()


def _clean_allow_comments(value):
    if not isinstance(value, bool):
        raise ValueError("allow_comments must be a boolean")
    return value


def create_post(author_id, title, body, allow_comments=True):
    if not user_repository.get_by_id(author_id):
        raise NotFoundError("User not found")

    post = post_repository.create_post(
        author_id=author_id,
        title=_clean_title(title),
        body=_clean_body(body),
        allow_comments=_clean_allow_comments(allow_comments)
    )
    db.session.commit()
    return post


def get_post(post_id):
    post = post_repository.get_post_by_id(post_id)
    if not post:
        raise NotFoundError("Post not found")
    return post


def get_posts_by_author(author_id):
    return post_repository.get_posts_by_author(author_id)


def _get_own_post(user_id, post_id):
    post = get_post(post_id)
    if post.author_id != user_id:
        raise PermissionDeniedError("You can only change your own posts")
    return post


def update_post(user_id, post_id, title=None, body=None, allow_comments=None):
    if title is None and body is None and allow_comments is None:
        raise ValueError("Nothing to update")

    post = _get_own_post(user_id, post_id)
    post_repository.update_post(
        post,
        title=_clean_title(title) if title is not None else None,
        body=_clean_body(body) if body is not None else None,
        allow_comments=(
            _clean_allow_comments(allow_comments)
            if allow_comments is not None else None
        )
    )
    db.session.commit()
    return post


def delete_post(user_id, post_id):
    post = _get_own_post(user_id, post_id)
    post_repository.delete_post(post)
    db.session.commit()
