from blogapp.db import db
from blogapp.models.user_model import User
from blogapp.repositories.profile_repository import create_profile_for_user


def get_by_id(user_id):
    if user_id is None:
        return None
    return db.session.get(User, user_id)


def get_all():
    return User.query.order_by(User.id.asc()).all()


def value_taken(column: str, value) -> bool:
    return (
        User.query.filter(getattr(User, column) == value).first()
        is not None
    )


def create_user(username, email, password_hash, name=None):
    user = User(
        username=username,
        email=email,
        password_hash=password_hash,
    )
    db.session.add(user)
    db.session.flush()

    create_profile_for_user(
        user_id=user.id,
        name=(name or username).strip(),
    )

    return user
