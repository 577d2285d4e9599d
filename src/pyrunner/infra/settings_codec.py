from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any

from pyrunner.domain.settings import GameSettings
from pyrunner.infra.exceptions import SettingsDecodeError, SettingsEncodeError


_FORMAT = "pyrunner.settings"
_VERSION_LATEST = 1

_FIELD_NAMES = tuple(f.name for f in fields(GameSettings))


def encode_settings(settings: GameSettings) -> dict:
    try:
        return {
            "format": _FORMAT,
            "version": _VERSION_LATEST,
            "settings": {k: float(v) for k, v in asdict(settings).items()},
        }
    except Exception as e:
        raise SettingsEncodeError(f"Failed to encode settings: {e}") from e


def decode_settings(obj: Any) -> GameSettings:
    try:
        if not isinstance(obj, dict):
            raise SettingsDecodeError("Settings document must be an object.")
        if obj.get("format") != _FORMAT:
            raise SettingsDecodeError("Invalid settings format marker.")

        ver = obj.get("version")
        if ver == 1:
            return _decode_v1(obj)

        raise SettingsDecodeError("Unsupported settings version.")
    except SettingsDecodeError:
        raise
    except Exception as e:
        raise SettingsDecodeError(f"Failed to decode settings: {e}") from e


def _decode_v1(obj: dict) -> GameSettings:
    raw = obj.get("settings", {})
    if not isinstance(raw, dict):
        raise SettingsDecodeError("settings must be an object.")

    unknown = sorted(set(raw) - set(_FIELD_NAMES))
    if unknown:
        raise SettingsDecodeError(f"Unknown settings: {', '.join(unknown)}.")

    values: dict[str, float] = {}
    for name, value in raw.items():
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SettingsDecodeError(f"settings.{name} must be a number.")
        values[name] = float(value)

    try:
        return GameSettings(**values)
    except ValueError as e:
        raise SettingsDecodeError(f"Invalid settings: {e}") from e
