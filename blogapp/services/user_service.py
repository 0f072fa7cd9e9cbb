import logging

from werkzeug.security import generate_password_hash

from blogapp.db import db
from blogapp.repositories import user_repository


logger = logging.getLogger(__name__)


def register(username, email, password):
    user = user_repository.create_user(
        username=username.strip(),
        email=email.strip(),
        password_hash=generate_password_hash(password),
    )
    db.session.commit()

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return user
