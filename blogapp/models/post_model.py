from datetime import datetime

from blogapp.db import db
from blogapp.models.tag_model import post_tag


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship("User", back_populates="posts", lazy="select")
    tags = db.relationship(
        "Tag",
        secondary=post_tag,
        backref=db.backref("posts", lazy="dynamic"),
        lazy="select",
    )
