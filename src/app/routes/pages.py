"""
Page Routes: HTML 페이지.

- GET / → 홈 (home.page.html)
- GET /about → 소개 (about.page.html)

렌더링/에러 처리는 PageRenderer.render_response에 위임.
디스크 읽기가 있으므로 sync 라우트 (FastAPI threadpool에서 실행).
"""

from fastapi import APIRouter, Request, Response
from fastapi.responses import HTMLResponse

from src.render.page import PageRenderer, TemplateData

router = APIRouter()


def get_renderer(request: Request) -> PageRenderer:
    """Request에서 PageRenderer 가져오기."""
    return request.app.state.renderer


@router.get("/", response_class=HTMLResponse)
def home_page(request: Request) -> Response:
    """홈 화면."""
    td = TemplateData(data={"title": "Home", "message": "Welcome!"})
    return get_renderer(request).render_response("home.page.html", td)


@router.get("/about", response_class=HTMLResponse)
def about_page(request: Request) -> Response:
    """소개 화면 (데이터 없음 → 빈 TemplateData)."""
    return get_renderer(request).render_response("about.page.html")
