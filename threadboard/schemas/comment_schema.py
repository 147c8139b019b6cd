from threadboard.extensions.extensions import ma


class CommentResponseSchema(ma.Schema):
    id = ma.Int()
    post_id = ma.Int()
    author_id = ma.Int()
    parent_id = ma.Int(allow_none=True)
    body = ma.Str()
    created_at = ma.DateTime()


class CommentNodeSchema(CommentResponseSchema):
    replies = ma.List(ma.Nested(lambda: CommentNodeSchema()))


class CommentEdgeSchema(ma.Schema):
    cursor = ma.Str()
    node = ma.Nested(CommentNodeSchema)


class PageInfoSchema(ma.Schema):
    start_cursor = ma.Str(allow_none=True)
    end_cursor = ma.Str(allow_none=True)
    has_next_page = ma.Bool()
    has_prev_page = ma.Bool()


class CommentConnectionSchema(ma.Schema):
    edges = ma.List(ma.Nested(CommentEdgeSchema))
    page_info = ma.Nested(PageInfoSchema)
