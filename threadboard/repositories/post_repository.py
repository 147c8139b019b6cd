from threadboard.db import db
from threadboard.models.post_model import Post


def create_post(author_id, title, body, allow_comments=True):
    post = Post(
        author_id=author_id,
        title=title,
        body=body,
        allow_comments=allow_comments
    )
    db.session.add(post)
    db.session.flush()

    return post


def get_post_by_id(post_id: int):
    return db.session.get(Post, post_id)


def get_posts_by_author(author_id: int):
    return (
        Post.query
        .filter_by(author_id=author_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def update_post(post, title=None, body=None, allow_comments=None):
    if title is not None:
        post.title = title
    if body is not None:
        post.body = body
    if allow_comments is not None:
        post.allow_comments = allow_comments
    return post


def delete_post(post):
    db.session.delete(post)
