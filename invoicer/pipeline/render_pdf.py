from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, NamedTuple, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from .. import config
from ..config import (
    ADDITIONAL_BLOCK_WIDTH,
    BLACK_COLOR,
    CELL_MARGIN,
    CURRENCY_SIGN,
    FILLER_ROWS,
    INVOICE_BLOCK_WIDTH,
    LEFT_MARGIN,
    LINE_HEIGHT,
    PAGE_WIDTH,
    PRIMARY_COLOR,
    PROVIDER_BLOCK_WIDTH,
    SECONDARY_COLOR,
    TABLE_COLUMN_WIDTHS,
    TOP_MARGIN,
    WHITE_COLOR,
)
from ..models import Config, Translation
from .dates import invoice_date, invoice_id


PAGE_SIZE = A4
ZERO_AMOUNT = f"0.0 {CURRENCY_SIGN}"


class FontPair(NamedTuple):
    regular: str
    bold: str


INVOICE_FONTS = FontPair("DejaVuSans", "DejaVuSans-Bold")
FONT_FILES = FontPair("DejaVuSans.ttf", "DejaVuSans-Bold.ttf")

PRIMARY = colors.HexColor(PRIMARY_COLOR)
TINT = colors.HexColor(SECONDARY_COLOR)
WHITE = colors.HexColor(WHITE_COLOR)
BLACK = colors.HexColor(BLACK_COLOR)


def register_fonts(fonts_dir: Path | None = None) -> FontPair:
    """
    Register the bundled DejaVu Sans TrueType pair with reportlab.

    The fonts are embedded in the PDF, so any Unicode text in the config
    (Cyrillic names, Polish addresses) renders with real glyphs.
    """
    root = fonts_dir or config.FONTS_DIR
    paths = [root / filename for filename in FONT_FILES]
    missing = [p for p in paths if not p.is_file()]
    if missing:
        raise FileNotFoundError(f"Bundled fonts missing: {', '.join(str(p) for p in missing)}")

    registered = set(pdfmetrics.getRegisteredFontNames())
    for name, path in zip(INVOICE_FONTS, paths):
        if name not in registered:
            pdfmetrics.registerFont(TTFont(name, str(path)))
    return INVOICE_FONTS


def _wrap_words(canv: canvas.Canvas, text: str, font_name: str, font_size: float, max_width: float) -> List[str]:
    words = (text or "").split()
    if not words:
        return [""]

    lines: List[str] = []
    cur: List[str] = []

    for w in words:
        test = " ".join(cur + [w])
        if canv.stringWidth(test, font_name, font_size) <= max_width:
            cur.append(w)
            continue

        if cur:
            lines.append(" ".join(cur))
            cur = [w]
        else:
            # a single word wider than the cell goes on its own line
            lines.append(w)

    if cur:
        lines.append(" ".join(cur))

    return lines


class PageCursor:
    """
    Cell-flow writer over a reportlab canvas.

    Positions and sizes are millimetres from the top-left page corner. After a
    cell the cursor moves right (ln=0), to the start of the next line (ln=1)
    or straight below (ln=2).
    """

    def __init__(self, canv: canvas.Canvas, fonts: FontPair, page_size: Tuple[float, float] = PAGE_SIZE) -> None:
        self.canv = canv
        self.fonts = fonts
        self.page_h = page_size[1]
        self.left = LEFT_MARGIN
        self.x = LEFT_MARGIN
        self.y = TOP_MARGIN
        self.cell_margin = CELL_MARGIN
        self.font_name = fonts.regular
        self.font_size = 10.0
        self.text_color = BLACK
        self.fill_color = WHITE

    def set_font(self, size: float, bold: bool = False) -> None:
        self.font_name = self.fonts.bold if bold else self.fonts.regular
        self.font_size = float(size)

    def set_text_color(self, color: colors.Color) -> None:
        self.text_color = color

    def set_fill_color(self, color: colors.Color) -> None:
        self.fill_color = color

    def set_xy(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def ln(self, h: float) -> None:
        self.x = self.left
        self.y += h

    def text_width(self, text: str) -> float:
        return self.canv.stringWidth(text, self.font_name, self.font_size) / mm

    def _baseline(self, top: float, h: float, valign: str) -> float:
        size = self.font_size / mm
        if valign == "T":
            return top + 0.8 * size
        return top + h / 2 + 0.3 * size

    def cell(
        self,
        w: float,
        h: float,
        text: str = "",
        ln: int = 0,
        align: str = "L",
        fill: bool = False,
        border: str = "",
        valign: str = "M",
    ) -> None:
        canv = self.canv
        x, top = self.x, self.y
        bottom = self.page_h - (top + h) * mm

        if fill:
            canv.setFillColor(self.fill_color)
            canv.rect(x * mm, bottom, w * mm, h * mm, stroke=0, fill=1)
        if "B" in border:
            canv.setStrokeColor(colors.black)
            canv.setLineWidth(0.2 * mm)
            canv.line(x * mm, bottom, (x + w) * mm, bottom)

        if text:
            if align == "R":
                tx = x + w - self.cell_margin - self.text_width(text)
            elif align == "C":
                tx = x + (w - self.text_width(text)) / 2
            else:
                tx = x + self.cell_margin
            canv.setFillColor(self.text_color)
            canv.setFont(self.font_name, self.font_size)
            canv.drawString(tx * mm, self.page_h - self._baseline(top, h, valign) * mm, text)

        if ln == 1:
            self.ln(h)
        elif ln == 2:
            self.y += h
        else:
            self.x += w

    def multi_cell(self, w: float, h: float, text: str, fill: bool = False) -> None:
        max_width = (w - 2 * self.cell_margin) * mm
        start_x = self.x
        for paragraph in text.split("\n"):
            for line in _wrap_words(self.canv, paragraph, self.font_name, self.font_size, max_width):
                self.cell(w, h, line, ln=2, fill=fill)
                self.x = start_x
        self.x = self.left


def format_money(value: Decimal) -> str:
    return f"{value:.2f} {CURRENCY_SIGN}"


def line_total(cfg: Config) -> Decimal:
    return cfg.quantity * cfg.unit_price


def line_item_rows(cfg: Config, translation: Translation) -> List[List[str]]:
    rows = [
        [
            f"{cfg.quantity:.2f}",
            f"{translation.agreement} {cfg.company.contract_id} ({cfg.date_range})",
            format_money(cfg.unit_price),
            format_money(line_total(cfg)),
        ]
    ]
    rows.extend([["", "", "", ""] for _ in range(FILLER_ROWS)])
    return rows


def totals_rows(cfg: Config, translation: Translation) -> List[Tuple[str, str]]:
    total = format_money(line_total(cfg))
    return [
        (translation.subtotal, total),
        (translation.tax, ZERO_AMOUNT),
        (translation.shipping, ZERO_AMOUNT),
        (translation.total, total),
    ]


def draw_table(page: PageCursor, header: Sequence[str], rows: Sequence[Sequence[str]]) -> int:
    """Draw the striped line-item table and return the number of rows drawn."""
    widths = TABLE_COLUMN_WIDTHS
    if len(header) != len(widths):
        raise ValueError(f"Table header needs {len(widths)} cells, got {len(header)}")
    for row in rows:
        if len(row) != len(widths):
            raise ValueError(f"Table row needs {len(widths)} cells, got {len(row)}")

    page.set_text_color(WHITE)
    page.set_fill_color(PRIMARY)
    page.set_font(10, bold=True)
    for width, label in zip(widths, header):
        page.cell(width, LINE_HEIGHT, label, align="C", fill=True)
    page.ln(LINE_HEIGHT)

    page.set_text_color(BLACK)
    page.set_fill_color(TINT)
    page.set_font(7)
    fill = False
    last = len(widths) - 1
    for row in rows:
        for i, (width, value) in enumerate(zip(widths, row)):
            page.cell(width, LINE_HEIGHT, value, ln=1 if i == last else 0, fill=fill)
        fill = not fill

    return 1 + len(rows)


def _draw_provider_block(page: PageCursor, cfg: Config, translation: Translation) -> None:
    provider = cfg.provider
    width = PROVIDER_BLOCK_WIDTH
    page.set_font(16, bold=True)
    page.set_text_color(PRIMARY)
    page.set_fill_color(TINT)
    page.cell(width, 10, provider.name.upper(), ln=1, fill=True)

    page.set_font(10)
    page.cell(width, LINE_HEIGHT, f"{translation.tax_id}: {provider.tax_id}", ln=1, fill=True)
    page.multi_cell(width, LINE_HEIGHT, f"{translation.address}: {provider.address}", fill=True)
    page.cell(width, LINE_HEIGHT, f"{translation.bank}: {provider.bank}", ln=1, fill=True)
    page.cell(width, LINE_HEIGHT, f"IBAN: {provider.iban}", ln=1, fill=True)
    page.cell(width, LINE_HEIGHT, f"SWIFT: {provider.swift}", ln=1, fill=True)
    page.cell(width, LINE_HEIGHT, f"{provider.phone} {provider.email}", ln=1, fill=True)


def _draw_invoice_block(page: PageCursor, translation: Translation, issued: date) -> None:
    width = INVOICE_BLOCK_WIDTH
    page.set_xy(LEFT_MARGIN + PROVIDER_BLOCK_WIDTH, TOP_MARGIN)
    page.set_text_color(WHITE)
    page.set_fill_color(PRIMARY)
    page.set_font(16, bold=True)
    page.cell(width, 10, translation.invoice.upper(), ln=2, align="R", fill=True)

    page.set_font(10)
    page.cell(width, LINE_HEIGHT, f"{translation.invoice_id}: {invoice_id(issued)}", ln=2, align="R", fill=True)
    page.cell(
        width,
        LINE_HEIGHT * 6,
        f"{translation.invoice_date}: {invoice_date(issued)}",
        ln=1,
        align="R",
        fill=True,
        valign="T",
    )


def _draw_bill_to(page: PageCursor, cfg: Config, translation: Translation) -> None:
    company = cfg.company
    page.set_text_color(PRIMARY)
    page.set_fill_color(WHITE)
    page.set_font(10, bold=True)
    page.cell(PAGE_WIDTH, LINE_HEIGHT, f"{translation.bill_to}: {company.name}", ln=1, fill=True)
    page.set_font(10)
    page.cell(PAGE_WIDTH, LINE_HEIGHT, f"{translation.address}: {company.address}", ln=1, fill=True)
    page.cell(PAGE_WIDTH, LINE_HEIGHT, company.additional, ln=1, fill=True)


def _draw_footer(page: PageCursor, cfg: Config, translation: Translation, additional: str) -> None:
    top = page.y
    for line in additional.split("\n"):
        page.cell(ADDITIONAL_BLOCK_WIDTH, LINE_HEIGHT, line, ln=1, align="C")

    totals = totals_rows(cfg, translation)
    labels_x = LEFT_MARGIN + ADDITIONAL_BLOCK_WIDTH

    page.set_xy(labels_x, top)
    page.cell_margin = 2
    for label, _ in totals:
        page.cell(30, LINE_HEIGHT, label, ln=2, align="R")

    page.set_xy(labels_x + 30, top)
    page.cell_margin = 0
    for _, amount in totals:
        page.cell(20, LINE_HEIGHT, amount, ln=2, align="R", border="B")
    page.cell_margin = CELL_MARGIN


def draw_invoice_page(
    canv: canvas.Canvas,
    fonts: FontPair,
    cfg: Config,
    translation: Translation,
    additional: str,
    issued: date,
) -> PageCursor:
    """Lay out one invoice page; the caller ends the page with showPage()."""
    page = PageCursor(canv, fonts)

    _draw_provider_block(page, cfg, translation)
    _draw_invoice_block(page, translation, issued)
    page.ln(5)

    _draw_bill_to(page, cfg, translation)
    page.ln(5)

    header = [translation.quantity, translation.description, translation.price, translation.total]
    draw_table(page, header, line_item_rows(cfg, translation))
    page.ln(5)

    _draw_footer(page, cfg, translation, additional)
    return page
