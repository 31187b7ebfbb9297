from app.extensions.extensions import ma
from app.schemas.user_schema import AuthorSchema


class CommentSchema(ma.Schema):
    id = ma.Int()
    author = ma.Nested(AuthorSchema)
    text = ma.Str()
    created_at = ma.DateTime()


class PostSchema(ma.Schema):
    id = ma.Int()
    author = ma.Nested(AuthorSchema)
    text = ma.Str(allow_none=True)
    media_url = ma.Str(allow_none=True)
    likes = ma.List(ma.Int(), attribute="liked_user_ids")
    comments = ma.List(ma.Nested(CommentSchema))
    created_at = ma.DateTime()
