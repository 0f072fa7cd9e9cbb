import logging
from dataclasses import dataclass

from flask import current_app

from blogapp.db import db
from blogapp.errors import RecordNotFound
from blogapp.repositories import post_repository, tag_repository, user_repository
from blogapp.services import tag_service


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostUpdate:
    """The fields of a post that the update action may change."""

    title: str
    content: str

    def apply_to(self, post):
        post.title = self.title
        post.content = self.content


def _serialize_author(user):
    if user is None:
        return None

    profile = user.profile
    return {
        "id": user.id,
        "username": user.username,
        "profile": {
            "name": profile.name,
            "bio": profile.bio,
        } if profile else None,
    }


def _serialize_post(post):
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "user_id": post.user_id,
        "user": _serialize_author(post.user),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


def list_posts(page, per_page=None):
    if per_page is None:
        per_page = current_app.config.get("POSTS_PER_PAGE", 6)
    if not isinstance(page, int) or page < 1:
        page = 1

    pagination = post_repository.paginate_latest(page, per_page)

    return {
        "total": pagination.total,
        "page": pagination.page,
        "per_page": pagination.per_page,
        "last_page": pagination.pages,
        "has_prev": pagination.has_prev,
        "has_next": pagination.has_next,
        "data": [_serialize_post(post) for post in pagination.items],
    }


def get_post_or_fail(post_id):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise RecordNotFound("Post not found")
    return post


def _get_user_or_fail(user_id):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise RecordNotFound("User not found")
    return user


def get_post_details(post_id):
    post = get_post_or_fail(post_id)
    return {
        "post": post,
        "tags": tag_repository.get_tag_summaries_for_post(post.id),
    }


def get_form_choices():
    return {
        "users": [user.to_dict() for user in user_repository.get_all()],
        "tags": [tag.to_dict() for tag in tag_repository.get_all()],
    }


def get_edit_form(post_id):
    post = get_post_or_fail(post_id)
    post_tag_ids = tag_repository.get_tag_ids_for_post(post.id)

    choices = get_form_choices()
    for tag in choices["tags"]:
        tag["checked"] = tag["id"] in post_tag_ids
    for user in choices["users"]:
        user["checked"] = user["id"] == post.user_id

    return {
        "post": post,
        "post_tag_ids": post_tag_ids,
        "users": choices["users"],
        "tags": choices["tags"],
    }


def create_post(user_id, title, content, tag_ids):
    try:
        user = _get_user_or_fail(user_id)
        post = post_repository.create_post_for_user(user, title, content)
        tag_service.attach(post.id, tag_ids)
    except RecordNotFound:
        db.session.rollback()
        raise

    db.session.commit()
    logger.info("Created post %s for user %s", post.id, user.id)
    return post


def update_post(post_id, changes: PostUpdate, user_id, tag_ids):
    try:
        post = get_post_or_fail(post_id)
        changes.apply_to(post)

        post.user = _get_user_or_fail(user_id)
        tag_service.sync(post.id, tag_ids)
    except RecordNotFound:
        db.session.rollback()
        raise

    db.session.commit()
    logger.info("Updated post %s", post.id)
    return post


def delete_post(post_id) -> bool:
    post = post_repository.get_by_id(post_id)
    if not post:
        logger.info("Post %s already gone, nothing to delete", post_id)
        return False

    try:
        tag_service.detach_all(post.id)
        post_repository.delete_post(post)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Deleted post %s", post_id)
    return True
