"""Errors raised while building an invoice."""


class InvoiceError(Exception):
    """Base exception for the invoice generator."""


class ConfigParseError(InvoiceError):
    """Raised when the config document is missing, malformed or incomplete."""


class TranslationError(InvoiceError):
    pass


class TranslationNotFoundError(TranslationError):
    """Raised when no translation file exists for a language code."""


class TranslationParseError(TranslationError):
    """Raised when a translation file is malformed or misses labels."""


class TemplateError(InvoiceError):
    """Raised when the additional-info template cannot be rendered."""


class FileWriteError(InvoiceError):
    pass


class UnsupportedPlatformError(InvoiceError):
    """Raised when there is no known command to open files on this OS."""
