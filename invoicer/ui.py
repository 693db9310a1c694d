from __future__ import annotations

import logging
import sys
import tkinter as tk
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from tkinter import messagebox, ttk
from typing import Callable, Optional

from .config import ICON_PATH, load_config
from .exceptions import InvoiceError
from .models import Config
from .opener import open_file
from .pipeline.dates import DATE_FORMAT, date_range_label, previous_month_range
from .pipeline.run import create_pdf


WINDOW_WIDTH = 500
WINDOW_HEIGHT = 100

logger = logging.getLogger(__name__)


@dataclass
class FormValues:
    quantity: str
    start: str
    end: str
    price: str


def _parse_decimal(value: str, field: str) -> Decimal:
    try:
        number = Decimal(value.strip().replace(",", "."))
    except InvalidOperation as exc:
        raise ValueError(f"{field} is not a number: {value!r}") from exc
    if not number.is_finite() or number < 0:
        raise ValueError(f"{field} must be a non-negative number: {value!r}")
    return number


def default_values(config: Config, today: date) -> FormValues:
    """Config quantity/price and the previous calendar month as the range."""
    start, end = previous_month_range(today)
    return FormValues(
        quantity=f"{config.quantity:.2f}",
        start=start.strftime(DATE_FORMAT),
        end=end.strftime(DATE_FORMAT),
        price=f"{config.unit_price:.2f}",
    )


def apply_values(config: Config, values: FormValues) -> None:
    config.quantity = _parse_decimal(values.quantity, "Quantity")
    config.unit_price = _parse_decimal(values.price, "Price")
    config.date_range = date_range_label(values.start.strip(), values.end.strip())


def submit(
    root,
    config: Config,
    values: FormValues,
    opener: Callable[[Path], None] = open_file,
    base_dir: Path | None = None,
) -> Path:
    """
    Regenerate the invoice from the form values and open it.

    Any failure is shown in a modal error dialog and ends the process with
    exit status 1. On success the window is closed.
    """
    try:
        apply_values(config, values)
        path = create_pdf(config, base_dir=base_dir)
        opener(path)
    except (InvoiceError, OSError, ValueError) as exc:
        logger.exception("Invoice generation failed")
        messagebox.showerror("Error", str(exc), parent=root)
        root.destroy()
        sys.exit(1)
    root.destroy()
    return path


class InvoiceForm:
    """Quantity / date range / price form that regenerates and opens the invoice."""

    def __init__(
        self,
        root: tk.Tk,
        config: Config,
        opener: Callable[[Path], None] = open_file,
        today: Optional[date] = None,
    ) -> None:
        self.root = root
        self.config = config
        self.opener = opener

        root.title("Invoice Generator")
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.icon = tk.PhotoImage(master=root, file=str(ICON_PATH))
        root.iconphoto(True, self.icon)

        defaults = default_values(config, today or date.today())
        self.quantity_var = tk.StringVar(master=root, value=defaults.quantity)
        self.start_var = tk.StringVar(master=root, value=defaults.start)
        self.end_var = tk.StringVar(master=root, value=defaults.end)
        self.price_var = tk.StringVar(master=root, value=defaults.price)

        frame = ttk.Frame(root, padding=10)
        frame.pack(fill="both", expand=True)
        ttk.Entry(frame, textvariable=self.quantity_var, width=7).pack(side="left", padx=5)
        ttk.Entry(frame, textvariable=self.start_var, width=11).pack(side="left", padx=5)
        ttk.Entry(frame, textvariable=self.end_var, width=11).pack(side="left", padx=5)
        ttk.Entry(frame, textvariable=self.price_var, width=7).pack(side="left", padx=5)
        ttk.Button(frame, text="Generate", command=self.generate).pack(side="left", padx=5)

    def values(self) -> FormValues:
        return FormValues(
            quantity=self.quantity_var.get(),
            start=self.start_var.get(),
            end=self.end_var.get(),
            price=self.price_var.get(),
        )

    def generate(self) -> None:
        submit(self.root, self.config, self.values(), self.opener)


def run_form(config_path: Path | None = None) -> None:
    root = tk.Tk()
    try:
        config = load_config(config_path)
    except InvoiceError as exc:
        root.withdraw()
        messagebox.showerror("Error", str(exc))
        root.destroy()
        sys.exit(1)
    InvoiceForm(root, config)
    root.mainloop()
