from fastapi import APIRouter, Depends

from ..application.ports.user_repo import UserDto
from ..application.services.profile_service import ProfileService
from ..dependencies import get_current_user, get_profile_service
from ..schemas import UserResponse, UpdatePreferencesRequest

router = APIRouter(prefix="/api/users", tags=["Users"])


def _to_response(user: UserDto) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        email_notifications=user.email_notifications,
        created_at=user.created_at,
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: int = Depends(get_current_user), profiles: ProfileService = Depends(get_profile_service)):
    return _to_response(profiles.get_profile(current_user))


@router.put("/me/preferences", response_model=UserResponse)
def update_preferences(body: UpdatePreferencesRequest, current_user: int = Depends(get_current_user), profiles: ProfileService = Depends(get_profile_service)):
    return _to_response(profiles.set_email_notifications(current_user, body.email_notifications))
