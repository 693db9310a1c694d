from __future__ import annotations

from datetime import date, timedelta
from typing import Tuple


DATE_FORMAT = "%d.%m.%Y"


def invoice_id(issued: date) -> str:
    return issued.strftime("%m-%Y")


def invoice_date(issued: date) -> str:
    return issued.strftime(DATE_FORMAT)


def previous_month_range(today: date) -> Tuple[date, date]:
    last = today.replace(day=1) - timedelta(days=1)
    return last.replace(day=1), last


def date_range_label(start: str, end: str) -> str:
    return f"{start}-{end}"
