# easyshop/repositories/user_repo.py
from sqlmodel import Session, select

from easyshop.models.user import User


class UserRepository:
    """
    Read-only data access for User.

    Accounts are provisioned by the identity provider, so there are
    no write operations here.
    """

    def get_by_username(self, session: Session, username: str) -> User | None:
        """Return a User by unique username, or None if not found."""
        stmt = select(User).where(User.username == username)
        return session.exec(stmt).first()
