"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: TEMPLATE_CACHE=0 uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.app.config import load_config
from src.app.routes import pages
from src.render.page import PageRenderer

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 렌더러 생성 (캐시는 빈 상태로 시작)
    종료 시: 캐시 정리
    """
    # Startup
    config = load_config()
    app.state.config = config
    app.state.renderer = PageRenderer(
        config.templates_dir,
        use_cache=config.use_cache,
        layouts=config.layouts,
    )
    logger.info(
        f"Page renderer ready: templates={config.templates_dir}, "
        f"use_cache={config.use_cache}"
    )

    yield

    # Shutdown
    app.state.renderer.clear_cache()


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Page Renderer",
    description="레이아웃 + partial + 페이지 템플릿 → HTML 응답",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Routes
# =============================================================================

app.include_router(pages.router, tags=["Pages"])


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    cli_config = load_config()
    logging.basicConfig(
        level=cli_config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    uvicorn.run(
        "src.app.main:app",
        host=cli_config.host,
        port=cli_config.port,
        reload=cli_config.reload,
    )
