from __future__ import annotations

import strawberry

from threadboard.graphql.types import (
    CommentConnectionType,
    PostType,
    resolve_comment_page,
)
from threadboard.repositories import post_repository


@strawberry.type
class Query:
    @strawberry.field
    def post(self, id: int) -> PostType | None:
        post = post_repository.get_post_by_id(id)
        if post is None:
            return None
        return PostType.from_model(post)

    @strawberry.field(description="Posts by one author, newest first")
    def posts(self, author_id: int) -> list[PostType]:
        return [
            PostType.from_model(post)
            for post in post_repository.get_posts_by_author(author_id)
        ]

    @strawberry.field(description="A page of comments on a post")
    def comments(
        self,
        post_id: int,
        first: int | None = None,
        last: int | None = None,
        after: str | None = None,
        before: str | None = None,
    ) -> CommentConnectionType:
        return resolve_comment_page(post_id, first, last, after, before)


schema = strawberry.Schema(query=Query)

__all__ = ["schema"]
