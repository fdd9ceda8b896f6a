"""regcheck — registration validation and user construction."""

__version__ = "0.1.0"
