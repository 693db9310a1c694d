from __future__ import annotations

import pytest

from invoicer.models import Config


def make_config(**overrides) -> Config:
    data = {
        "provider": {
            "name": "Jane Doe",
            "id": "12345678A",
            "address": "Calle Mayor 1, 28013 Madrid",
            "bank": "Example Bank",
            "iban": "ES91 2100 0418 4502 0005 1332",
            "swift": "CAIXESBBXXX",
            "phone": "+34 600 000 000",
            "email": "jane@example.com",
        },
        "company": {
            "name": "Example GmbH",
            "address": "Hauptstrasse 5, Berlin",
            "additional": "VAT ID: DE123456789",
            "contract-id": "C-100",
        },
        "langs": ["en"],
        "price": 50.0,
        "quantity": 10,
        "dates": "01.01.2024-31.01.2024",
    }
    data.update(overrides)
    return Config.model_validate(data)


@pytest.fixture
def sample_config() -> Config:
    return make_config()
