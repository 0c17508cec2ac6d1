# easyshop/repositories/profile_repo.py
from typing import Any

from sqlalchemy import update
from sqlmodel import Session

from easyshop.models.profile import Profile


class ProfileRepository:
    """
    Data access layer for Profile.

    Responsibilities:
      - Pure DB operations, addressed by user_id
      - No FastAPI, no HTTP, no business logic
    """

    def get_by_user_id(self, session: Session, user_id: int) -> Profile | None:
        """Return the profile owned by user_id, or None if there is none."""
        return session.get(Profile, user_id)

    def create(self, session: Session, profile: Profile) -> Profile:
        """
        Insert a new profile.

        A second profile for the same user violates the primary key and
        raises sqlalchemy.exc.IntegrityError.
        """
        session.add(profile)
        session.commit()
        session.refresh(profile)
        return profile

    def update(
        self,
        session: Session,
        user_id: int,
        values: dict[str, Any],
    ) -> Profile | None:
        """
        Overwrite every mutable field of the profile owned by user_id.

        Any user_id inside `values` is dropped; the argument is the only
        address. Returns the reloaded profile, or None if the user has no
        profile (nothing is inserted in that case).
        """
        values = {k: v for k, v in values.items() if k != "user_id"}
        stmt = update(Profile).where(Profile.user_id == user_id).values(**values)
        result = session.execute(stmt)
        session.commit()
        if result.rowcount == 0:
            return None
        return session.get(Profile, user_id, populate_existing=True)
