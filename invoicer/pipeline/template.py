from __future__ import annotations

from string import Template

from ..exceptions import TemplateError
from ..models import Provider


def contact_line(provider: Provider) -> str:
    return f"{provider.name} <{provider.email}>"


def render_additional(template: str, contacts: str) -> str:
    """
    Fill the ``${contacts}`` placeholder of a translation's additional text.

    Line breaks are kept; the layout splits the result per line.
    """
    try:
        return Template(template).substitute(contacts=contacts)
    except KeyError as exc:
        raise TemplateError(f"Unknown placeholder in additional text: {exc.args[0]}") from exc
    except ValueError as exc:
        raise TemplateError(f"Invalid additional text template: {exc}") from exc
