"""Protected endpoints.

모든 라우트가 유효한 Bearer JWT를 요구합니다.
"""

from fastapi import APIRouter, Depends

from apps.resource.application.auth import AuthenticatedUser
from apps.resource.presentation.http.auth import get_current_user

router = APIRouter(prefix="/api/protected", tags=["protected"])


@router.get("/profile")
async def profile(user: AuthenticatedUser = Depends(get_current_user)):
    """인증된 사용자 프로필."""
    return {"id": user.user_id, "email": user.email}


@router.get("/data")
async def secure_data(user: AuthenticatedUser = Depends(get_current_user)):
    return {
        "message": "This is protected data",
        "user_id": user.user_id,
        "data": {
            "secret": "This data is only visible to authenticated users",
            "items": ["item1", "item2", "item3"],
        },
    }
