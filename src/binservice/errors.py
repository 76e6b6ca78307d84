"""Error taxonomy shared by the store gateways and services."""

from __future__ import annotations


class BinServiceError(Exception):
    """Base class for errors raised by the bin service."""


class StoreError(BinServiceError):
    """A store rejected or failed an operation."""

    def __init__(self, store: str, operation: str, message: str) -> None:
        super().__init__(f"{store} {operation} failed: {message}")
        self.store = store
        self.operation = operation


class StoreUnavailable(StoreError, ConnectionError):
    """The store could not be reached. Callers may retry."""


class PartialWriteFailure(StoreError):
    """The graph node was written but the relational row was not.

    The node is left in place; it has to be reconciled manually.
    """

    def __init__(self, correlation_key: str, graph_node_ref: str, message: str) -> None:
        super().__init__(
            "relational",
            "create",
            f"{message} (graph node {graph_node_ref} for '{correlation_key}' was kept)",
        )
        self.correlation_key = correlation_key
        self.graph_node_ref = graph_node_ref


class NotFound(BinServiceError, LookupError):
    """The requested entity does not exist."""


class UnknownZone(BinServiceError, ValueError):
    def __init__(self, zone_id: int) -> None:
        super().__init__(f"Unknown zone id {zone_id}.")
        self.zone_id = zone_id


class MalformedCorrelationKey(BinServiceError, ValueError):
    """A correlation key does not contain the address/neighborhood separator."""
