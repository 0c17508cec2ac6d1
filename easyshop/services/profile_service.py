# easyshop/services/profile_service.py
import logging

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from easyshop.models.profile import Profile
from easyshop.models.user import User
from easyshop.repositories.profile_repo import ProfileRepository
from easyshop.schemas.profile import ProfileCreate, ProfileUpdate

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Business logic for the caller's own profile.

    Responsibilities:
      - address every operation by the authenticated user's id
      - map absence to 404 and duplicates to 409
    """

    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    def get_me(self, session: Session, current_user: User) -> Profile:
        profile = self.repo.get_by_user_id(session, current_user.id)
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found",
            )
        return profile

    def create_me(
        self,
        session: Session,
        current_user: User,
        payload: ProfileCreate,
    ) -> Profile:
        """
        Create the caller's profile.

        One profile per user: a second create is rejected with 409,
        including when two creates race and the primary key catches it.
        """
        if self.repo.get_by_user_id(session, current_user.id) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Profile already exists",
            )

        profile = Profile(user_id=current_user.id, **payload.model_dump())
        try:
            return self.repo.create(session, profile)
        except IntegrityError:
            session.rollback()
            logger.info("Duplicate profile create for user %s", current_user.id)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Profile already exists",
            )

    def update_me(
        self,
        session: Session,
        current_user: User,
        payload: ProfileUpdate,
    ) -> Profile:
        """
        Overwrite the caller's profile fields.

        404 if the caller has no profile yet; nothing is inserted.
        """
        profile = self.repo.update(session, current_user.id, payload.model_dump())
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found",
            )
        return profile
