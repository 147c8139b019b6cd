from threadboard.models.user_model import User
from threadboard.db import db


def get_by_id(user_id: int):
    return db.session.get(User, user_id)


def create_user(username):
    user = User(username=username.strip())
    db.session.add(user)
    db.session.commit()
    return user
