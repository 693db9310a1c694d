from __future__ import annotations

from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from .exceptions import ConfigParseError
from .models import Config


PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_CONFIG_PATH = PACKAGE_DIR / "config.yaml"
I18N_DIR = PACKAGE_DIR / "i18n"
FONTS_DIR = PACKAGE_DIR / "assets" / "fonts"
ICON_PATH = PACKAGE_DIR / "assets" / "invoice-icon.ppm"

PRIMARY_COLOR = "#2E5980"
SECONDARY_COLOR = "#F0F8FF"
WHITE_COLOR = "#FFFFFF"
BLACK_COLOR = "#000000"

# Page geometry in millimetres (A4 portrait).
TOP_MARGIN = 20.0
LEFT_MARGIN = 20.0
CELL_MARGIN = 5.0
LINE_HEIGHT = 5.0
PAGE_WIDTH = 170.0
PROVIDER_BLOCK_WIDTH = 100.0
INVOICE_BLOCK_WIDTH = 70.0
ADDITIONAL_BLOCK_WIDTH = 120.0

TABLE_COLUMN_WIDTHS: List[float] = [20.0, 110.0, 20.0, 20.0]
FILLER_ROWS = 9

CURRENCY_SIGN = "€"


def parse_config(text: str) -> Config:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Invalid YAML in config: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigParseError("Config must be a mapping")
    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigParseError(f"Config validation failed: {exc}") from exc


def load_config(path: Path | None = None) -> Config:
    config_path = path or DEFAULT_CONFIG_PATH
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigParseError(f"Config not readable: {config_path}") from exc
    return parse_config(text)
