from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from invoicer.config import load_config, parse_config
from invoicer.exceptions import ConfigParseError


VALID = """
provider:
  name: Jane Doe
  id: X1
  email: jane@example.com
company:
  name: Example GmbH
  contract-id: C-100
langs: [en, es]
price: 50.0
quantity: 10
dates: 01.01.2024-31.01.2024
"""


def test_parse_config_reads_aliases() -> None:
    config = parse_config(VALID)
    assert config.provider.tax_id == "X1"
    assert config.company.contract_id == "C-100"
    assert config.languages == ["en", "es"]
    assert config.unit_price == Decimal("50.0")
    assert config.quantity == Decimal("10")
    assert config.date_range == "01.01.2024-31.01.2024"


def test_numbers_default_to_zero() -> None:
    config = parse_config("provider: {name: A}\ncompany: {name: B}\nlangs: [en]\n")
    assert config.unit_price == 0
    assert config.quantity == 0
    assert config.provider.iban == ""


@pytest.mark.parametrize(
    "text",
    [
        "provider: {name: A}\nlangs: [en]\n",
        "provider: {name: ''}\ncompany: {name: B}\nlangs: [en]\n",
        "provider: {name: A}\ncompany: {name: B}\nlangs: []\n",
        "provider: {name: A}\ncompany: {name: B}\nlangs: [en]\nprice: -1\n",
        "provider: {name: A}\ncompany: {name: B}\nlangs: [en]\nquantity: lots\n",
        "provider: [unclosed\n",
        "just a string",
    ],
)
def test_invalid_config_raises(text: str) -> None:
    with pytest.raises(ConfigParseError):
        parse_config(text)


def test_bundled_config_loads() -> None:
    config = load_config()
    assert config.languages
    assert config.provider.name


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigParseError):
        load_config(tmp_path / "missing.yaml")


def test_config_is_mutable_for_form_overrides(sample_config) -> None:
    sample_config.quantity = Decimal("3")
    sample_config.date_range = "01.02.2024-29.02.2024"
    assert sample_config.quantity == Decimal("3")
