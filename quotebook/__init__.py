"""Quotation, invoice and receipt book with key-value backed record stores."""

__version__ = "0.1.0"
