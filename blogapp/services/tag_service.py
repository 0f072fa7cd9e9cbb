from blogapp.db import db
from blogapp.errors import RecordNotFound
from blogapp.repositories import post_repository, tag_repository


def _get_post(post_id):
    post = post_repository.get_by_id(post_id)
    if not post:
        raise RecordNotFound("Post not found")
    return post


def _load_tags(tag_ids):
    wanted = set(tag_ids)
    tags = tag_repository.get_by_ids(wanted)
    if len(tags) != len(wanted):
        raise RecordNotFound("Tag not found")
    return tags


def attach(post_id, tag_ids):
    post = _get_post(post_id)
    current = {tag.id for tag in post.tags}

    additions = set(tag_ids or []) - current
    post.tags.extend(_load_tags(additions))
    db.session.flush()

    return {tag.id for tag in post.tags}


def sync(post_id, tag_ids):
    post = _get_post(post_id)
    wanted = set(tag_ids or [])
    current = {tag.id for tag in post.tags}

    additions = wanted - current
    removals = current - wanted

    new_tags = _load_tags(additions)
    for tag in [tag for tag in post.tags if tag.id in removals]:
        post.tags.remove(tag)
    post.tags.extend(new_tags)
    db.session.flush()

    return {
        "attached": sorted(additions),
        "detached": sorted(removals),
    }


def detach_all(post_id):
    post = _get_post(post_id)
    detached = len(post.tags)
    post.tags.clear()
    db.session.flush()
    return detached
