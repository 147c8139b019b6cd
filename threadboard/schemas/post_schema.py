from threadboard.extensions.extensions import ma


class PostResponseSchema(ma.Schema):
    id = ma.Int()
    author_id = ma.Int()
    title = ma.Str()
    body = ma.Str()
    allow_comments = ma.Bool()
    created_at = ma.DateTime()
