from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from reportlab.pdfgen import canvas

from ..exceptions import FileWriteError
from ..models import Config
from ..storage import output_path
from .render_pdf import PAGE_SIZE, draw_invoice_page, register_fonts
from .template import contact_line, render_additional
from .translations import load_translation


logger = logging.getLogger(__name__)


def create_pdf(config: Config, base_dir: Path | None = None, issued: date | None = None) -> Path:
    """
    Render one page per configured language into a single invoice PDF.

    The document is only written once every page has been laid out, so a
    failing language leaves no file behind.
    """
    issued = issued or date.today()
    try:
        path = output_path(issued, base_dir=base_dir)
    except OSError as exc:
        raise FileWriteError(f"Output directory not usable: {exc}") from exc
    fonts = register_fonts()
    contacts = contact_line(config.provider)

    canv = canvas.Canvas(str(path), pagesize=PAGE_SIZE)
    canv.setTitle(f"Invoice {issued.strftime('%m-%Y')}")
    canv.setAuthor(config.provider.name)
    canv.setSubject(config.company.name)

    for lang in config.languages:
        translation = load_translation(lang)
        additional = render_additional(translation.additional_template, contacts)
        draw_invoice_page(canv, fonts, config, translation, additional, issued)
        canv.showPage()
        logger.info("Rendered %s page", lang)

    try:
        canv.save()
    except OSError as exc:
        raise FileWriteError(f"Unable to write {path}: {exc}") from exc
    logger.info("Wrote %s", path)
    return path
