from __future__ import annotations

from pathlib import Path

import pytest

from invoicer.exceptions import TranslationNotFoundError, TranslationParseError
from invoicer.pipeline.translations import available_languages, load_translation


def test_bundled_languages_load() -> None:
    codes = available_languages()
    assert {"en", "es", "de"} <= set(codes)
    for code in codes:
        translation = load_translation(code)
        assert "${contacts}" in translation.additional_template


def test_english_labels() -> None:
    translation = load_translation("en")
    assert translation.invoice == "Invoice"
    assert translation.bill_to == "Bill to"
    assert translation.total == "Total"


@pytest.mark.parametrize("code", ["xx", "", "../config", "en/../en", "en.yaml"])
def test_unknown_language_is_not_found(code: str) -> None:
    with pytest.raises(TranslationNotFoundError):
        load_translation(code)


def test_not_found_is_not_a_parse_error() -> None:
    with pytest.raises(TranslationNotFoundError) as info:
        load_translation("zz")
    assert not isinstance(info.value, TranslationParseError)
    assert "en" in str(info.value)


def test_malformed_translation(tmp_path: Path) -> None:
    (tmp_path / "fr.yaml").write_text("tax-id: [unclosed\n", encoding="utf-8")
    with pytest.raises(TranslationParseError):
        load_translation("fr", i18n_dir=tmp_path)


def test_incomplete_translation(tmp_path: Path) -> None:
    (tmp_path / "fr.yaml").write_text("tax-id: NIF\naddress: Adresse\n", encoding="utf-8")
    with pytest.raises(TranslationParseError):
        load_translation("fr", i18n_dir=tmp_path)


def test_total_label_is_optional(tmp_path: Path) -> None:
    source = Path(__file__).resolve().parents[1] / "invoicer" / "i18n" / "en.yaml"
    lines = [line for line in source.read_text(encoding="utf-8").splitlines() if not line.startswith("total:")]
    (tmp_path / "xx.yaml").write_text("\n".join(lines), encoding="utf-8")
    assert load_translation("xx", i18n_dir=tmp_path).total == "Total"
