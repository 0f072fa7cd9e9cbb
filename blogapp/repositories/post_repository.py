from sqlalchemy.orm import joinedload, load_only

from blogapp.db import db
from blogapp.models.post_model import Post
from blogapp.models.user_model import User


def get_by_id(post_id):
    return db.session.get(Post, post_id)


def create_post_for_user(user, title, content):
    post = Post(
        user_id=user.id,
        title=title,
        content=content,
    )
    db.session.add(post)
    db.session.flush()

    return post


def paginate_latest(page: int, per_page: int):
    query = (
        Post.query
        .options(
            joinedload(Post.user).options(
                load_only(User.id, User.username),
                joinedload(User.profile),
            )
        )
        .order_by(Post.updated_at.desc(), Post.id.desc())
    )

    return query.paginate(page=page, per_page=per_page, error_out=False)


def delete_post(post):
    db.session.delete(post)
    db.session.flush()
