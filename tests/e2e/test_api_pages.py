"""
test_api_pages.py - 페이지 라우트 E2E 테스트

엔드포인트:
- GET / (home.page.html)
- GET /about (about.page.html)
- GET /health
- GET /static/css/style.css
"""

import inspect
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.main import app
from src.app.routes import pages
from src.domain.constants import CACHE_ENV_VAR
from src.render.page import PageRenderer

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client(monkeypatch):
    """FastAPI TestClient (프로젝트 default.yaml, 캐시 활성화)."""
    monkeypatch.delenv(CACHE_ENV_VAR, raising=False)
    with TestClient(app) as client:
        yield client


# =============================================================================
# Page Routes (HTML)
# =============================================================================


class TestHomePage:
    """홈 페이지 테스트."""

    def test_home_page_loads(self, client):
        """GET / → HTML 페이지 (레이아웃 + partial 포함)."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<h1>Home</h1>" in response.text
        assert "Welcome!" in response.text
        assert 'class="site-header"' in response.text
        assert 'class="site-footer"' in response.text

    def test_home_page_cached_after_first_request(self, client):
        """첫 요청 후 캐시에 저장."""
        client.get("/")

        renderer = client.app.state.renderer
        assert "home.page.html" in renderer.cached_names()


class TestAboutPage:
    """소개 페이지 테스트."""

    def test_about_page_without_data(self, client):
        """GET /about → 데이터 없이 렌더."""
        response = client.get("/about")

        assert response.status_code == 200
        assert "<h1>About</h1>" in response.text
        assert "Contact:" not in response.text


class TestRenderFailures:
    """렌더 실패 → 500 테스트."""

    def test_missing_templates_returns_500(self, client, tmp_path: Path):
        """templates/ 비어 있음 → 500 + 에러 메시지."""
        client.app.state.renderer = PageRenderer(tmp_path, use_cache=True)

        response = client.get("/")

        assert response.status_code == 500
        assert "text/plain" in response.headers["content-type"]
        assert "TEMPLATE_NOT_FOUND" in response.text

    def test_broken_page_returns_500(self, client, project_root: Path, tmp_path: Path):
        """페이지 실행 오류 → 500, 부분 HTML 없음."""
        source_root = project_root / "templates"
        root = tmp_path / "templates"
        (root / "partials").mkdir(parents=True)
        for rel in [
            "base.layout.html",
            "partials/header.partial.html",
            "partials/footer.partial.html",
        ]:
            (root / rel).write_text(
                (source_root / rel).read_text(encoding="utf-8"), encoding="utf-8"
            )
        (root / "about.page.html").write_text(
            '{% extends "base.layout.html" %}'
            "{% block content %}{{ data.owner.name }}{% endblock %}",
            encoding="utf-8",
        )
        client.app.state.renderer = PageRenderer(root, use_cache=False)

        response = client.get("/about")

        assert response.status_code == 500
        assert "RENDER_FAILED" in response.text
        assert "site-header" not in response.text


# =============================================================================
# Misc
# =============================================================================


class TestHealthAndStatic:
    """헬스 체크 / 정적 파일 테스트."""

    def test_health(self, client):
        """GET /health → ok."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_stylesheet(self, client):
        """GET /static/css/style.css."""
        response = client.get("/static/css/style.css")

        assert response.status_code == 200
        assert "text/css" in response.headers["content-type"]


class TestRouteExecution:
    """라우트 실행 방식 테스트."""

    def test_page_routes_are_sync(self):
        """디스크 읽기가 있는 페이지 라우트는 sync (threadpool 실행)."""
        assert not inspect.iscoroutinefunction(pages.home_page)
        assert not inspect.iscoroutinefunction(pages.about_page)
