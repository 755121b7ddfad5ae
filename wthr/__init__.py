"""Interactive prompt for exploring hourly temperature datasets as text charts."""

__version__ = "0.1.0"