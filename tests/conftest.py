"""
Pytest fixtures for the page renderer tests.

테스트 구성:
- 실제 프로젝트 templates/ 와 tmp_path 기반 템플릿 세트 분리
"""

from pathlib import Path

import pytest
import yaml

from src.render.page import PageRenderer

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Template Fixtures
# =============================================================================

BASE_LAYOUT = """<html><head><title>{% block title %}Base{% endblock %}</title></head>
<body>{% include "partials/header.partial.html" %}
<main>{% block content %}{% endblock %}</main>
{% include "partials/footer.partial.html" %}</body></html>"""

HEADER_PARTIAL = "<header>HEADER</header>"
FOOTER_PARTIAL = "<footer>FOOTER</footer>"

GREETING_PAGE = """{% extends "base.layout.html" %}
{% block title %}Greeting{% endblock %}
{% block content %}<p>Hello, {{ data.name | default("stranger") }}!</p>{% endblock %}"""


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """
    테스트용 templates/ 루트.

    포함:
    - base.layout.html
    - partials/header.partial.html, partials/footer.partial.html
    - greeting.page.html
    """
    root = tmp_path / "templates"
    (root / "partials").mkdir(parents=True)

    (root / "base.layout.html").write_text(BASE_LAYOUT, encoding="utf-8")
    (root / "partials" / "header.partial.html").write_text(HEADER_PARTIAL, encoding="utf-8")
    (root / "partials" / "footer.partial.html").write_text(FOOTER_PARTIAL, encoding="utf-8")
    (root / "greeting.page.html").write_text(GREETING_PAGE, encoding="utf-8")

    return root


@pytest.fixture
def renderer(templates_root: Path) -> PageRenderer:
    """캐시 활성화된 PageRenderer."""
    return PageRenderer(templates_root, use_cache=True)


@pytest.fixture
def uncached_renderer(templates_root: Path) -> PageRenderer:
    """캐시 비활성화된 PageRenderer (매번 디스크에서 빌드)."""
    return PageRenderer(templates_root, use_cache=False)
