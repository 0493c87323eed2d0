"""Bulk lead file loading."""

from .loader import LeadFileError, LeadFileLoader, coerce_value

__all__ = ["LeadFileError", "LeadFileLoader", "coerce_value"]
