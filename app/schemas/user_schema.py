from app.extensions.extensions import ma


class AuthorSchema(ma.Schema):
    id = ma.Int()
    username = ma.Str()
    full_name = ma.Str()
    profile_image_url = ma.Str(allow_none=True)


class UserSummarySchema(AuthorSchema):
    email = ma.Str()


class UserSchema(UserSummarySchema):
    bio = ma.Str()
    link = ma.Str()
    cover_image_url = ma.Str(allow_none=True)
    following = ma.List(ma.Int(), attribute="following_ids")
    followers = ma.List(ma.Int(), attribute="follower_ids")
    liked_posts = ma.List(ma.Int(), attribute="liked_post_ids")
    created_at = ma.DateTime()
