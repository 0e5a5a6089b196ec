"""Commission Manager - registro de ventas y análisis de comisiones."""

__version__ = "1.0.0"
