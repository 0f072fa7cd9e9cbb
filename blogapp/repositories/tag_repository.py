from blogapp.db import db
from blogapp.models.tag_model import Tag, post_tag


def get_all():
    return Tag.query.order_by(Tag.id.asc()).all()


def get_by_ids(tag_ids):
    if not tag_ids:
        return []
    return Tag.query.filter(Tag.id.in_(tag_ids)).all()


def get_tag_ids_for_post(post_id: int) -> set[int]:
    rows = (
        db.session.query(post_tag.c.tag_id)
        .filter(post_tag.c.post_id == post_id)
        .all()
    )
    return {row[0] for row in rows}


def get_tag_summaries_for_post(post_id: int):
    rows = (
        db.session.query(Tag.id, Tag.title)
        .join(post_tag, post_tag.c.tag_id == Tag.id)
        .filter(post_tag.c.post_id == post_id)
        .order_by(Tag.id.asc())
        .all()
    )
    return [{"id": row.id, "title": row.title} for row in rows]
