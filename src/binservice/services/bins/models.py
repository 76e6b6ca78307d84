"""Results of bin lifecycle operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class BinCreated:
    bin_id: int
    graph_node_ref: str
    correlation_key: str


@dataclass(slots=True)
class BinDeleted:
    """Outcome of a delete that removed the bin from at least one store.

    ``partial`` is set when one store had nothing to delete or failed; the
    reasons are listed in ``warnings``.
    """

    correlation_key: str
    relational_deleted: int
    graph_deleted: int
    warnings: List[str] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return bool(self.warnings)
