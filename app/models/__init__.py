from app.models.user_model import User
from app.models.follow_model import Follow
from app.models.post_model import Post
from app.models.comment_model import Comment
from app.models.like_model import PostLike
from app.models.notification_model import Notification

__all__ = ["User", "Follow", "Post", "Comment", "PostLike", "Notification"]
