"""
Error definitions for page rendering.

규칙:
- 조용한 실패 금지 → PolicyRejectError로 명시적 실패
- HTTP 변환은 route 경계(render_response)에서만 수행
"""

from typing import Any


class PolicyRejectError(Exception):
    """
    렌더링 정책 위반/실패 시 발생하는 에러.

    사용처:
    - 템플릿 파일(레이아웃/partial/페이지) 누락
    - 템플릿 문법 오류
    - 실행(render) 중 오류
    - 잘못된 템플릿 이름 (경로 탈출 등)

    Usage:
        raise PolicyRejectError("TEMPLATE_NOT_FOUND", path=str(path))
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Load ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    INVALID_TEMPLATE_NAME = "INVALID_TEMPLATE_NAME"
    TEMPLATE_READ_FAILED = "TEMPLATE_READ_FAILED"

    # === Compile ===
    TEMPLATE_SYNTAX_ERROR = "TEMPLATE_SYNTAX_ERROR"

    # === Execute ===
    RENDER_FAILED = "RENDER_FAILED"
