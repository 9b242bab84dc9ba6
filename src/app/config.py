"""
애플리케이션 설정: default.yaml + 환경변수.

default.yaml 예시:
    templates:
      dir: templates
      use_cache: true
      layouts:
        - base.layout.html
        - partials/header.partial.html
        - partials/footer.partial.html
    server:
      host: 127.0.0.1
      port: 8000
      log_level: INFO
      reload: false

환경변수:
- TEMPLATE_CACHE=0|1 → templates.use_cache 덮어쓰기 (개발 시 캐시 끄기)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    CACHE_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_HOST,
    DEFAULT_LAYOUTS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    TEMPLATES_DIR_NAME,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AppConfig:
    """애플리케이션 설정."""
    templates_dir: Path = PROJECT_ROOT / TEMPLATES_DIR_NAME
    use_cache: bool = True
    layouts: list[str] = field(default_factory=lambda: list(DEFAULT_LAYOUTS))

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    reload: bool = False


def parse_bool(value: str) -> bool | None:
    """환경변수/YAML 문자열 → bool (인식 불가 시 None)."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def config_bool(value: Any, default: bool) -> bool:
    """
    YAML 값 → bool.

    따옴표로 감싼 문자열("false")도 parse_bool로 해석, 인식 불가 시 default.
    """
    if isinstance(value, str):
        parsed = parse_bool(value)
        return default if parsed is None else parsed
    if value is None:
        return default
    return bool(value)


def load_config(config_path: Path | None = None) -> AppConfig:
    """
    설정 파일 로드.

    Args:
        config_path: YAML 경로 (기본: 프로젝트 루트의 default.yaml)

    Returns:
        AppConfig (파일이 없으면 기본값)
    """
    if config_path is None:
        config_path = PROJECT_ROOT / CONFIG_FILENAME

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    templates_config = data.get("templates", {}) or {}
    server_config = data.get("server", {}) or {}

    config = AppConfig()

    # 상대 경로는 설정 파일 위치 기준
    templates_dir = templates_config.get("dir")
    if templates_dir:
        path = Path(templates_dir)
        config.templates_dir = path if path.is_absolute() else config_path.parent / path

    config.use_cache = config_bool(templates_config.get("use_cache"), config.use_cache)
    layouts = templates_config.get("layouts")
    if layouts is not None:
        config.layouts = [str(layout) for layout in layouts]

    config.host = server_config.get("host", config.host)
    config.port = int(server_config.get("port", config.port))
    config.log_level = str(server_config.get("log_level", config.log_level)).upper()
    config.reload = config_bool(server_config.get("reload"), config.reload)

    env_cache = os.environ.get(CACHE_ENV_VAR)
    if env_cache is not None:
        parsed = parse_bool(env_cache)
        if parsed is not None:
            config.use_cache = parsed

    return config
