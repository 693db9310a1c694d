from __future__ import annotations

import re
from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from .. import config
from ..exceptions import TranslationNotFoundError, TranslationParseError
from ..models import Translation


LANGUAGE_CODE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def available_languages(i18n_dir: Path | None = None) -> List[str]:
    root = i18n_dir or config.I18N_DIR
    return sorted(path.stem for path in root.glob("*.yaml"))


def load_translation(code: str, i18n_dir: Path | None = None) -> Translation:
    root = i18n_dir or config.I18N_DIR
    path = root / f"{code}.yaml"
    if not LANGUAGE_CODE.match(code or "") or not path.is_file():
        available = ", ".join(available_languages(root)) or "none"
        raise TranslationNotFoundError(f"No translation for '{code}' (available: {available})")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise TranslationParseError(f"Invalid YAML in {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise TranslationParseError(f"Translation {path.name} must be a mapping")
    try:
        return Translation.model_validate(data)
    except ValidationError as exc:
        raise TranslationParseError(f"Translation {path.name} is incomplete: {exc}") from exc
