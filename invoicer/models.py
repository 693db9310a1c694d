from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Provider(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    tax_id: str = Field(default="", alias="id")
    address: str = ""
    bank: str = ""
    iban: str = ""
    swift: str = ""
    phone: str = ""
    email: str = ""


class Company(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    address: str = ""
    additional: str = ""
    contract_id: str = Field(default="", alias="contract-id")


class Config(BaseModel):
    """Invoice settings. The form overwrites quantity, price and dates in place."""

    model_config = ConfigDict(populate_by_name=True)

    provider: Provider
    company: Company
    languages: List[str] = Field(alias="langs", min_length=1)
    unit_price: Decimal = Field(default=Decimal("0"), alias="price", ge=0)
    quantity: Decimal = Field(default=Decimal("0"), ge=0)
    date_range: str = Field(default="", alias="dates")


class Translation(BaseModel):
    """Labels for one language plus the additional-info template."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tax_id: str = Field(alias="tax-id")
    address: str
    bank: str
    invoice: str
    invoice_id: str = Field(alias="invoice-id")
    invoice_date: str = Field(alias="invoice-date")
    bill_to: str = Field(alias="bill-to")
    quantity: str
    description: str
    price: str
    subtotal: str
    tax: str
    shipping: str
    agreement: str
    additional_template: str = Field(alias="additional")
    total: str = "Total"
