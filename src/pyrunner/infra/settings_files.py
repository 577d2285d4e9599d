from __future__ import annotations

import json
import os
from pathlib import Path

from pyrunner.domain.settings import GameSettings
from pyrunner.infra.exceptions import SettingsDecodeError, SettingsEncodeError, SettingsSaveError
from pyrunner.infra.settings_codec import decode_settings, encode_settings
from pyrunner.log import get_logger

log = get_logger(__name__)


def load_settings_from_path(path: Path) -> GameSettings:
    try:
        data = path.read_text(encoding="utf-8")
        obj = json.loads(data)
        settings = decode_settings(obj)
    except SettingsDecodeError:
        raise
    except Exception as e:
        raise SettingsDecodeError(f"Failed to load settings from {path}: {e}") from e

    log.info("loaded settings from %s", path)
    return settings


def save_settings_to_path(settings: GameSettings, path: Path) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        payload = encode_settings(settings)
        text = json.dumps(payload, indent=2, sort_keys=True, allow_nan=False)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except SettingsEncodeError:
        raise
    except Exception as e:
        try:
            if tmp.exists():
                tmp.unlink()
        except OSError:
            log.warning("could not remove temporary file %s", tmp)
        raise SettingsSaveError(f"Failed to save settings to {path}: {e}") from e

    log.info("saved settings to %s", path)
