import configparser
import logging
import math
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path(__file__).with_name("settings.ini")
SECTION = "spread"

DEFAULT_SETTINGS = {
    "card_spread": "10",
    "card_spread_x": "",
    "card_spread_y": "",
    "scale_value": "1.0",
}


@dataclass(frozen=True)
class SpreadDefaults:
    card_spread: float
    card_spread_x: float | None
    card_spread_y: float | None
    scale_value: float


def _as_number(raw):
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: str(v).strip() for k, v in settings.items() if k in DEFAULT_SETTINGS})

    spread = _as_number(data["card_spread"])
    if spread is None:
        spread = float(DEFAULT_SETTINGS["card_spread"])
    data["card_spread"] = f"{spread:g}"

    # Custom axis defaults are optional; anything unparseable means "not set".
    for key in ("card_spread_x", "card_spread_y"):
        value = _as_number(data[key])
        data[key] = "" if value is None else f"{value:g}"

    scale = _as_number(data["scale_value"])
    if scale is None or scale <= 0:
        scale = float(DEFAULT_SETTINGS["scale_value"])
    data["scale_value"] = f"{scale:g}"
    return data


def load_settings():
    parser = configparser.ConfigParser(interpolation=None)
    if not SETTINGS_PATH.exists():
        return _sanitize({})
    try:
        parser.read(SETTINGS_PATH, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError):
        logger.warning("Ignoring unreadable settings file %s", SETTINGS_PATH)
        return _sanitize({})
    if SECTION not in parser:
        return _sanitize({})
    raw = {key: parser[SECTION].get(key, default) for key, default in DEFAULT_SETTINGS.items()}
    return _sanitize(raw)


def save_settings(settings):
    data = _sanitize(settings)
    parser = configparser.ConfigParser(interpolation=None)
    parser[SECTION] = data
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with SETTINGS_PATH.open("w", encoding="utf-8") as f:
        parser.write(f)
    logger.info("Wrote settings to %s", SETTINGS_PATH)


def spread_defaults(settings) -> SpreadDefaults:
    data = _sanitize(settings)
    return SpreadDefaults(
        card_spread=float(data["card_spread"]),
        card_spread_x=_as_number(data["card_spread_x"]),
        card_spread_y=_as_number(data["card_spread_y"]),
        scale_value=float(data["scale_value"]),
    )
