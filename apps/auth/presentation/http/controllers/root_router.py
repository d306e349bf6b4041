"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
/device 페이지는 설정에 따라 create_app()에서 별도로 등록됩니다.
"""

from fastapi import APIRouter

from apps.auth.presentation.http.controllers.general.router import router as general_router
from apps.auth.presentation.http.controllers.pages import login_router
from apps.auth.presentation.http.controllers.proxy import router as proxy_router

router = APIRouter()

router.include_router(general_router, tags=["general"])
router.include_router(login_router, tags=["pages"])
router.include_router(proxy_router, tags=["auth"])
