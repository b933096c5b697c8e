from __future__ import annotations

import os
import sys
from pathlib import Path


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def project_root() -> Path:
    # src/ytsource/utils/paths.py -> src/ytsource/utils -> src/ytsource -> src -> root
    return Path(__file__).resolve().parents[3]


def user_data_dir(app_name: str = "ytsource") -> Path:
    home = Path(os.path.expanduser("~"))
    return home / "Documents" / app_name


def config_path() -> Path:
    # Dev: keep repo-root config.json for convenience.
    # Frozen: store config under a writable per-user directory.
    if is_frozen():
        return user_data_dir() / "config.json"
    return project_root() / "config.json"


def log_dir() -> Path:
    if is_frozen():
        return user_data_dir() / "logs"
    return project_root() / "logs"
