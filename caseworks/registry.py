from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import structlog
import yaml

from caseworks.settings import modules_path

logger = structlog.get_logger(__name__)

MANIFEST_NAME = "module.yaml"


def _normalize_manifest(data: Dict[str, Any], *, path: Path) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or str(name).replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount,
            "public": bool(public),
            "path": path,
        }
    )
    return normalized


def load_modules(root: Path | None = None) -> Dict[str, Dict[str, Any]]:
    """Read every ``<module>/module.yaml`` below ``root`` keyed by module name."""
    root = modules_path() if root is None else root
    modules: Dict[str, Dict[str, Any]] = {}
    if not root.exists():
        return modules

    for module_dir in sorted(root.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / MANIFEST_NAME
        if not manifest.exists():
            continue
        with open(manifest, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        normalized = _normalize_manifest(data, path=module_dir)
        if normalized is None:
            logger.warning("registry.manifest_without_name", path=str(manifest))
            continue
        modules[normalized["name"]] = normalized
    return modules
