"""
Render layer: HTML 페이지 출력 생성.

역할:
- 레이아웃 + partial + 페이지 템플릿 → HTML 응답
- Jinja2 (autoescape), 메모리 캐시
"""

from .page import PageRenderer, TemplateData, validate_template_name

__all__ = [
    "PageRenderer",
    "TemplateData",
    "validate_template_name",
]
