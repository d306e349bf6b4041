"""Login Page Controller."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from apps.auth.presentation.http.controllers.pages.templating import templates
from apps.auth.setup.config import Settings
from apps.auth.setup.dependencies import get_app_settings

router = APIRouter()

PROVIDER_LABELS = {"github": "GitHub", "google": "Google"}


@router.get("/", summary="서비스 상태 메시지")
async def index() -> dict[str, str]:
    return {"message": "Auth service is running"}


@router.get("/login", response_class=HTMLResponse, summary="소셜 로그인 페이지")
async def login_page(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    """소셜 로그인 버튼이 있는 페이지.

    로그인 후 callbackURL("/")로 돌아옵니다.
    """
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "base_url": settings.base_url,
            "client_version": settings.auth_client_version,
            "provider": settings.social_provider,
            "provider_label": PROVIDER_LABELS.get(
                settings.social_provider, settings.social_provider.capitalize()
            ),
        },
    )
