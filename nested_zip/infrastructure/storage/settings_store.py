"""Storage helpers for benchmark settings overrides."""
from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from nested_zip.config import DEFAULT_SETTINGS, Settings

DEFAULT_PATH = Path("nested_zip_settings.json")


def _count(value: Any) -> int:
    count = int(value)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return count


def _flag(value: Any) -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in {"true", "false"}:
        return value.strip().lower() == "true"
    raise ValueError(f"not a boolean: {value!r}")


_CONVERTERS = {
    "root": Path,
    "file_count": _count,
    "line_count": _count,
    "text": str,
    "color": _flag,
}


def _normalize_settings(raw: dict[str, Any] | None) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    if not isinstance(raw, dict):
        return normalized
    for key, value in raw.items():
        converter = _CONVERTERS.get(key)
        if converter is None:
            continue
        try:
            normalized[key] = converter(value)
        except (TypeError, ValueError):
            continue
    return normalized


def load_settings(path: Path | None = None, base: Settings = DEFAULT_SETTINGS) -> Settings:
    override_path = path or DEFAULT_PATH
    if not override_path.exists():
        return base
    try:
        data = json.loads(override_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return base
    return replace(base, **_normalize_settings(data))


def save_settings(settings: Settings, path: Path | None = None) -> dict[str, Any]:
    override_path = path or DEFAULT_PATH
    payload = {
        "root": str(settings.root),
        "file_count": settings.file_count,
        "line_count": settings.line_count,
        "text": settings.text,
        "color": settings.color,
    }
    override_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    return payload
