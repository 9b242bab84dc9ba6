"""
Domain Constants: 렌더링 전역 상수.

파일명 정책, 경로 상수 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Template Directory Structure (템플릿 디렉토리 구조)
# =============================================================================
# templates/
# ├── base.layout.html
# ├── partials/
# │   ├── header.partial.html
# │   └── footer.partial.html
# └── <page>.page.html

TEMPLATES_DIR_NAME = "templates"
BASE_LAYOUT_FILENAME = "base.layout.html"
HEADER_PARTIAL_FILENAME = "partials/header.partial.html"
FOOTER_PARTIAL_FILENAME = "partials/footer.partial.html"

# 순서 고정: base → header → footer (페이지 템플릿은 마지막에 추가)
DEFAULT_LAYOUTS: tuple[str, ...] = (
    BASE_LAYOUT_FILENAME,
    HEADER_PARTIAL_FILENAME,
    FOOTER_PARTIAL_FILENAME,
)

# =============================================================================
# Template Names (템플릿 이름 정책)
# =============================================================================

TEMPLATE_NAME_MAX_LENGTH = 100
FORBIDDEN_NAME_CHARS = set('\\:*?"<>|\x00')

# =============================================================================
# Configuration (설정)
# =============================================================================

CONFIG_FILENAME = "default.yaml"
CACHE_ENV_VAR = "TEMPLATE_CACHE"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
