"""Cross-store correlation key for bins.

The key is ``address|neighborhood``. The relational row stores it as its
graph cross-reference and the graph node stores it as its ``id`` property.
Separators inside either part are not escaped. :func:`split_key` splits at the
last separator, so an address containing ``|`` round-trips but a neighborhood
containing ``|`` does not.
"""

from __future__ import annotations

from ..errors import MalformedCorrelationKey

SEPARATOR = "|"


def derive_key(address: str, neighborhood: str) -> str:
    return f"{address}{SEPARATOR}{neighborhood}"


def split_key(key: str) -> tuple[str, str]:
    """Return ``(address, neighborhood)``, splitting at the last separator."""

    address, separator, neighborhood = key.rpartition(SEPARATOR)
    if not separator:
        raise MalformedCorrelationKey(f"Correlation key '{key}' has no '{SEPARATOR}' separator.")
    return address, neighborhood
