from threadboard.db import db
from threadboard.models.timestamps import utcnow


class Post(db.Model):
    __tablename__ = "posts"
    id = db.Column(db.Integer, primary_key=True)
    author_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    body = db.Column(db.Text, nullable=False)
    allow_comments = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    comments = db.relationship(
        "Comment",
        backref="post",
        lazy="select",
        cascade="all, delete-orphan"
    )
