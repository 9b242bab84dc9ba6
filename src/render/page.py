"""
HTML 페이지 렌더러: Jinja2 기반.

구성:
- 템플릿 세트 = base 레이아웃 + header/footer partial + 페이지 템플릿 (순서 고정)
- 캐시 활성화 시 이름 → 컴파일된 템플릿 맵에서 재사용
- 캐시 미스/비활성화 시 디스크에서 다시 빌드
- 실패는 로그 후 500 응답 (render_response)
"""

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any

import jinja2
from fastapi import Response
from fastapi.responses import HTMLResponse, PlainTextResponse
from jinja2 import DictLoader, Environment, select_autoescape

from src.domain.constants import (
    DEFAULT_LAYOUTS,
    FORBIDDEN_NAME_CHARS,
    TEMPLATE_NAME_MAX_LENGTH,
)
from src.domain.errors import ErrorCodes, PolicyRejectError

logger = logging.getLogger(__name__)


# =============================================================================
# Template Data
# =============================================================================

@dataclass
class TemplateData:
    """
    템플릿에 전달되는 동적 데이터.

    템플릿에서는 {{ data.title }} 형태로 접근.
    """
    data: dict[str, Any] = field(default_factory=dict)

    def to_context(self) -> dict[str, Any]:
        """Jinja2 렌더링 컨텍스트."""
        return {"data": self.data}

    @classmethod
    def coerce(cls, value: "TemplateData | Mapping[str, Any] | None") -> "TemplateData":
        """None/dict → TemplateData 변환 (None이면 빈 데이터)."""
        if value is None:
            return cls()
        if isinstance(value, TemplateData):
            return value
        return cls(data=dict(value))


# =============================================================================
# Validation
# =============================================================================

def validate_template_name(name: str) -> None:
    """
    템플릿 이름 유효성 검증.

    규칙:
    - 빈 이름 금지
    - 최대 100자
    - 절대 경로, ".." 세그먼트 금지 (templates/ 밖으로 탈출 방지)
    - 금지 문자: \\ : * ? " < > | NUL

    Args:
        name: 템플릿 이름 (예: "home.page.html")

    Raises:
        PolicyRejectError: INVALID_TEMPLATE_NAME
    """
    if not name:
        raise PolicyRejectError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            name=name,
            reason="empty",
        )

    if len(name) > TEMPLATE_NAME_MAX_LENGTH:
        raise PolicyRejectError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            name=name,
            reason=f"exceeds {TEMPLATE_NAME_MAX_LENGTH} characters",
        )

    found_forbidden = set(name) & FORBIDDEN_NAME_CHARS
    if found_forbidden:
        raise PolicyRejectError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            name=name,
            reason="forbidden characters",
            forbidden=sorted(found_forbidden),
        )

    path = PurePosixPath(name)
    if path.is_absolute() or ".." in path.parts:
        raise PolicyRejectError(
            ErrorCodes.INVALID_TEMPLATE_NAME,
            name=name,
            reason="path traversal",
        )


# =============================================================================
# Page Renderer
# =============================================================================

class PageRenderer:
    """
    HTML 페이지 렌더러.

    Usage:
        renderer = PageRenderer(templates_root, use_cache=True)
        response = renderer.render_response("home.page.html", {"title": "Home"})
    """

    def __init__(
        self,
        templates_root: Path,
        use_cache: bool = True,
        layouts: Sequence[str] = DEFAULT_LAYOUTS,
    ):
        """
        Args:
            templates_root: templates/ 루트 경로
            use_cache: True면 컴파일된 템플릿을 메모리 맵에서 재사용
            layouts: 페이지 앞에 함께 컴파일할 레이아웃/partial (순서 유지)
        """
        self.templates_root = templates_root
        self.use_cache = use_cache
        self.layouts = tuple(layouts)
        self._cache: dict[str, jinja2.Template] = {}
        self._lock = threading.Lock()

    # =========================================================================
    # Load / Compile
    # =========================================================================

    def template_layers(self, name: str) -> list[Path]:
        """
        템플릿 세트를 구성하는 파일 목록.

        순서: base 레이아웃 → header → footer → 페이지 템플릿

        Raises:
            PolicyRejectError: INVALID_TEMPLATE_NAME
        """
        validate_template_name(name)
        return [self.templates_root / rel for rel in (*self.layouts, name)]

    def build_from_disk(self, name: str) -> jinja2.Template:
        """
        디스크에서 템플릿 세트를 읽어 컴파일.

        모든 레이어를 하나의 Environment에 등록하고 전부 컴파일한 뒤
        페이지 템플릿을 캐시 맵에 저장한다.

        Args:
            name: 페이지 템플릿 이름

        Returns:
            컴파일된 페이지 템플릿

        Raises:
            PolicyRejectError: INVALID_TEMPLATE_NAME, TEMPLATE_NOT_FOUND,
                TEMPLATE_SYNTAX_ERROR, TEMPLATE_READ_FAILED
        """
        sources: dict[str, str] = {}
        for rel, path in zip((*self.layouts, name), self.template_layers(name)):
            sources[rel] = self._read_layer(name, path)

        env = Environment(
            loader=DictLoader(sources),
            autoescape=select_autoescape(default=True),
        )

        try:
            # ParseFiles처럼 레이어 전체를 미리 컴파일 (문법 오류 조기 감지)
            for rel in sources:
                env.get_template(rel)
            template = env.get_template(name)
        except jinja2.TemplateSyntaxError as e:
            raise PolicyRejectError(
                ErrorCodes.TEMPLATE_SYNTAX_ERROR,
                template=name,
                file=e.name,
                line=e.lineno,
                error=e.message,
            ) from e

        with self._lock:
            self._cache[name] = template

        logger.info(f"building template from disk: {name}")
        return template

    def _read_layer(self, name: str, path: Path) -> str:
        """레이어 파일 읽기 (UTF-8)."""
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as e:
            raise PolicyRejectError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                template=name,
                path=str(path),
            ) from e
        except (OSError, ValueError) as e:
            # ValueError: UTF-8 디코딩 실패 또는 경로의 NUL 문자 (layouts 설정값)
            raise PolicyRejectError(
                ErrorCodes.TEMPLATE_READ_FAILED,
                template=name,
                path=str(path),
                error=str(e),
            ) from e

    def get_template(self, name: str) -> jinja2.Template:
        """
        컴파일된 템플릿 조회.

        캐시 활성화 + 맵에 존재 → 캐시 사용
        그 외 → 디스크에서 빌드
        """
        if self.use_cache:
            with self._lock:
                template = self._cache.get(name)
            if template is not None:
                return template

        return self.build_from_disk(name)

    # =========================================================================
    # Cache
    # =========================================================================

    def cached_names(self) -> list[str]:
        """캐시에 저장된 템플릿 이름 목록 (정렬)."""
        with self._lock:
            return sorted(self._cache)

    def clear_cache(self) -> None:
        """캐시 비우기 (템플릿 파일 교체 후 재빌드 유도)."""
        with self._lock:
            self._cache.clear()

    # =========================================================================
    # Execute
    # =========================================================================

    def render(
        self,
        name: str,
        data: TemplateData | Mapping[str, Any] | None = None,
    ) -> str:
        """
        템플릿 실행 → HTML 문자열.

        Args:
            name: 페이지 템플릿 이름
            data: 템플릿 데이터 (None이면 빈 TemplateData)

        Returns:
            렌더링된 HTML

        Raises:
            PolicyRejectError: 빌드 실패 코드 또는 RENDER_FAILED
        """
        template = self.get_template(name)
        td = TemplateData.coerce(data)

        try:
            return template.render(td.to_context())
        except Exception as e:
            raise PolicyRejectError(
                ErrorCodes.RENDER_FAILED,
                template=name,
                error=str(e),
            ) from e

    def render_response(
        self,
        name: str,
        data: TemplateData | Mapping[str, Any] | None = None,
        status_code: int = 200,
    ) -> Response:
        """
        템플릿 실행 → HTTP 응답.

        전체 HTML을 먼저 렌더링한 뒤 응답하므로 실패 시 부분 출력이 나가지 않음.

        Returns:
            성공: HTMLResponse (status_code)
            실패: 500 PlainTextResponse (에러 메시지)
        """
        try:
            content = self.render(name, data)
        except PolicyRejectError as e:
            stage = "executing" if e.code == ErrorCodes.RENDER_FAILED else "building"
            logger.error(f"Error {stage} template: {e}", exc_info=True)
            return PlainTextResponse(
                content=str(e),
                status_code=500,
                headers={"X-Content-Type-Options": "nosniff"},
            )

        return HTMLResponse(content=content, status_code=status_code)
