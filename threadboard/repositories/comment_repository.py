from sqlalchemy.exc import SQLAlchemyError

from threadboard.db import db
from threadboard.errors import StorageUnavailableError
from threadboard.models.comment_model import Comment
from threadboard.models.post_model import Post
from threadboard.pagination.range_query import DESCENDING


def create_comment(author_id, post_id, body, parent_id=None):
    comment = Comment(
        author_id=author_id,
        post_id=post_id,
        parent_id=parent_id,
        body=body
    )

    db.session.add(comment)
    db.session.flush()
    return comment


def get_comment_by_id(comment_id: int):
    return db.session.get(Comment, comment_id)


def update_comment(comment, body):
    comment.body = body
    return comment


def delete_comment(comment):
    db.session.delete(comment)


def is_comments_allowed(post_id: int):
    allowed = (
        db.session.query(Post.allow_comments)
        .filter(Post.id == post_id)
        .scalar()
    )
    return allowed


def fetch_comment_rows(query):
    """Run a ``CommentRangeQuery`` and return the rows in the requested order."""
    stmt = Comment.query.filter(Comment.post_id == query.post_id)

    if query.after is not None:
        stmt = stmt.filter(Comment.created_at > query.after)
    if query.before is not None:
        stmt = stmt.filter(Comment.created_at < query.before)

    if query.direction == DESCENDING:
        stmt = stmt.order_by(Comment.created_at.desc(), Comment.id.desc())
    else:
        stmt = stmt.order_by(Comment.created_at.asc(), Comment.id.asc())

    if query.limit is not None:
        stmt = stmt.limit(query.limit)

    try:
        return stmt.all()
    except SQLAlchemyError as e:
        raise StorageUnavailableError("Comment storage unavailable") from e
