"""Bin lifecycle exports."""

from .coordinator import BinCoordinator, validate_capacity
from .models import BinCreated, BinDeleted

__all__ = ["BinCoordinator", "BinCreated", "BinDeleted", "validate_capacity"]
