"""Parking lot management: vehicles, owners, cells, menus and entry/exit history."""

__version__ = "0.1.0"