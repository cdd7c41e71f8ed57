# ========================
# file: fieldhash/core/preset/registry.py
# ========================
from __future__ import annotations
from typing import List
import os
from .errors import NotFoundError

PRESETS_ENV_VAR = "FIELDHASH_PRESETS"

# <repo>/presets, плюс папки, добавленные приложением
_SEARCH_FOLDERS: List[str] = [
    os.path.join(
        os.path.dirname(os.path.dirname(os.path.dirname(os.path.dirname(__file__)))), "presets"
    ),
]


def _search_roots() -> List[str]:
    # папки из переменной окружения проверяются первыми
    env = os.environ.get(PRESETS_ENV_VAR, "")
    extra = [p for p in env.split(os.pathsep) if p]
    return extra + _SEARCH_FOLDERS


def resolve_preset_path(preset_id: str) -> str:
    """Map an id like 'preview/noise_4d' to a JSON file in one of the preset folders."""
    rel = preset_id.replace("\\", "/").strip("/") + ".json"
    for root in _search_roots():
        candidate = os.path.join(root, rel)
        if os.path.isfile(candidate):
            return candidate
    raise NotFoundError(f"Preset id '{preset_id}' not found in preset folders")


def add_search_folder(path: str) -> None:
    path = os.path.abspath(path)
    if path not in _SEARCH_FOLDERS:
        _SEARCH_FOLDERS.append(path)
