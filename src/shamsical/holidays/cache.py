from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional


def default_cache_dir() -> Path:
    override = os.environ.get("SHAMSICAL_CACHE_DIR")
    if override:
        return Path(override)
    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / "shamsical"
    return Path.home() / ".cache" / "shamsical"


def cache_path(year: int, cache_dir: Optional[Path] = None) -> Path:
    base = cache_dir if cache_dir is not None else default_cache_dir()
    return base / f"holidays_{year}.json"


def read_cache(path: Path) -> Optional[Dict[str, str]]:
    """Return the cached mapping, or None if the file is missing or unusable."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    return {str(k): str(v) for k, v in data.items()}


def write_cache(path: Path, holidays: Dict[str, str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(holidays, ensure_ascii=False), encoding="utf-8")
