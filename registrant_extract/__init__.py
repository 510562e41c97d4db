"""Registrant extraction from point-of-sale CSV exports."""

__version__ = "0.1.0"
