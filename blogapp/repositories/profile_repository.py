from blogapp.db import db
from blogapp.models.profile_model import Profile


def create_profile_for_user(user_id: int, name: str):
    profile = Profile(
        user_id=user_id,
        name=name,
        bio="",
    )
    db.session.add(profile)
    return profile
