# easyshop/routers/profile.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from easyshop.core.auth import require_auth
from easyshop.database import get_session
from easyshop.models.user import User
from easyshop.repositories.profile_repo import ProfileRepository
from easyshop.schemas.profile import ProfileCreate, ProfileRead, ProfileUpdate
from easyshop.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])

repo = ProfileRepository()
service = ProfileService(repo)


@router.get("", response_model=ProfileRead)
def read_my_profile(
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Return the authenticated user's profile.

    404 if the user has not created a profile yet.
    """
    return service.get_me(session, current_user)


@router.post(
    "",
    response_model=ProfileRead,
    status_code=status.HTTP_201_CREATED,
)
def create_my_profile(
    payload: ProfileCreate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Create the authenticated user's profile.

    409 if one already exists.
    """
    return service.create_me(session, current_user, payload)


@router.put("", response_model=ProfileRead)
def update_my_profile(
    payload: ProfileUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(require_auth),
):
    """
    Replace the authenticated user's profile fields.

    The target is always the caller's own profile; a user_id in the
    body has no effect.
    """
    return service.update_me(session, current_user, payload)
