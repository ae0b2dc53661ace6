from __future__ import annotations

import logging
import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent


def _flag(name: str, default: str = "off") -> bool:
    value = os.getenv(name, default).strip().lower()
    return value in {"1", "true", "yes", "on"}


def shared_templates_dir(root_dir: Path = ROOT_DIR) -> Path:
    env_path = os.getenv("CASEWORKS_SHARED_TEMPLATES")
    if env_path:
        return Path(env_path)
    return root_dir / "caseworks" / "templates"


def modules_path(root_dir: Path = ROOT_DIR) -> Path:
    env_path = os.getenv("CASEWORKS_MODULES_PATH")
    if env_path:
        return Path(env_path)
    return root_dir / "modules"


def log_level() -> int:
    raw_level = os.getenv("CASEWORKS_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(raw_level)
    return level if isinstance(level, int) else logging.INFO


def log_json() -> bool:
    return _flag("CASEWORKS_LOG_JSON", "off")
