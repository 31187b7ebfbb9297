from app.models.comment_model import Comment


def create_comment(post, author_id, text):
    comment = Comment(
        author_id=author_id,
        text=text.strip()
    )
    post.comments.append(comment)
    return comment
