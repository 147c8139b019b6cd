"""Strawberry types for posts and paginated comment threads."""

from __future__ import annotations

from datetime import datetime

import strawberry

from threadboard.services import comment_service


@strawberry.type(name="Comment", description="A comment with the replies found on the same page")
class CommentType:
    id: int
    post_id: int
    author_id: int
    parent_id: int | None
    body: str
    created_at: datetime
    replies: list[CommentType] = strawberry.field(
        description="Replies whose parent is on the same page"
    )

    @classmethod
    def from_node(cls, node: dict) -> CommentType:
        return cls(
            id=node["id"],
            post_id=node["post_id"],
            author_id=node["author_id"],
            parent_id=node["parent_id"],
            body=node["body"],
            created_at=node["created_at"],
            replies=[cls.from_node(reply) for reply in node["replies"]],
        )


@strawberry.type(name="CommentEdge")
class CommentEdgeType:
    cursor: str = strawberry.field(description="Opaque cursor for this edge")
    node: CommentType


@strawberry.type(name="PageInfo", description="Cursor pagination metadata")
class PageInfoType:
    start_cursor: str | None = None
    end_cursor: str | None = None
    has_next_page: bool = False
    has_prev_page: bool = False


@strawberry.type(name="CommentConnection")
class CommentConnectionType:
    edges: list[CommentEdgeType]
    page_info: PageInfoType

    @classmethod
    def from_connection(cls, connection: dict) -> CommentConnectionType:
        return cls(
            edges=[
                CommentEdgeType(
                    cursor=edge["cursor"],
                    node=CommentType.from_node(edge["node"]),
                )
                for edge in connection["edges"]
            ],
            page_info=PageInfoType(**connection["page_info"]),
        )


def resolve_comment_page(
    post_id: int,
    first: int | None,
    last: int | None,
    after: str | None,
    before: str | None,
) -> CommentConnectionType:
    connection = comment_service.fetch_comment_page(
        post_id,
        first=first,
        last=last,
        after=after,
        before=before,
    )
    return CommentConnectionType.from_connection(connection)


@strawberry.type(name="Post")
class PostType:
    id: int
    author_id: int
    title: str
    body: str
    allow_comments: bool
    created_at: datetime

    @classmethod
    def from_model(cls, post) -> PostType:
        return cls(
            id=post.id,
            author_id=post.author_id,
            title=post.title,
            body=post.body,
            allow_comments=post.allow_comments,
            created_at=post.created_at,
        )

    @strawberry.field(description="Comments on this post, oldest first")
    def comments(
        self,
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> CommentConnectionType:
        return resolve_comment_page(self.id, first, last, after, before)
