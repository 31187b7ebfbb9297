from app.models.like_model import PostLike


def get_like(post_id: int, user_id: int):
    return PostLike.query.filter_by(
        post_id=post_id,
        user_id=user_id
    ).first()


def add_like(post, user_id: int):
    like = PostLike(user_id=user_id)
    post.likes.append(like)
    return like


def remove_like(post, like):
    post.likes.remove(like)
