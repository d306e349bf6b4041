"""Device Approval Page Controller.

CLI에서 발급한 user code를 브라우저에서 승인하는 페이지입니다.
AUTH_DEVICE_AUTHORIZATION_ENABLED=true인 배포에서만 등록됩니다.
"""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from apps.auth.domain.value_objects import format_user_code_input
from apps.auth.presentation.http.controllers.pages.templating import templates
from apps.auth.setup.config import Settings
from apps.auth.setup.dependencies import get_app_settings

router = APIRouter()


@router.get("/device", response_class=HTMLResponse, summary="디바이스 승인 페이지")
async def device_page(
    request: Request,
    user_code: str = Query("", description="CLI에 표시된 코드"),
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """디바이스 승인 페이지.

    user_code는 ABCD-1234 형식으로 정리되어 입력란에 미리 채워집니다.
    템플릿 autoescape로 HTML 이스케이프됩니다.
    """
    return templates.TemplateResponse(
        request,
        "device.html",
        {
            "base_url": settings.base_url,
            "client_version": settings.auth_client_version,
            "provider": settings.social_provider,
            "user_code": format_user_code_input(user_code),
        },
    )
