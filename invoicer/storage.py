from __future__ import annotations

from datetime import date
from pathlib import Path


def invoice_filename(issued: date) -> str:
    return f"invoice-{issued.strftime('%m-%y')}.pdf"


def output_path(issued: date, base_dir: Path | None = None) -> Path:
    root = base_dir or Path.cwd()
    root.mkdir(parents=True, exist_ok=True)
    return root / invoice_filename(issued)
