"""User data access."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from blogful.models import User


def get_all_users(session: Session) -> list[User]:
    """Return every user in storage order."""
    return list(session.scalars(select(User)).all())
