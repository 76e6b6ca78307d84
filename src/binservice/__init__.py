"""Waste-bin service: dual-store bin records and zone route ordering."""

__version__ = "0.1.0"
