from __future__ import annotations

from typing import Any, ContextManager, List, Optional, Protocol, Sequence, Set

Row = List[Any]


class RowStore(Protocol):
    """Row-oriented store addressed by (partition name, row index).

    Row indexes are 0-based over data rows; the header is never returned by
    :meth:`scan_rows`. Indexes are positional, so deleting a row shifts every
    row after it, so a scan and the writes addressed by its indexes must run
    inside one :meth:`exclusive` scope.
    """

    def ensure_partition(self, name: str, header: Sequence[str]) -> str:
        """Create the partition if absent and return its handle."""
        raise NotImplementedError

    def get_partition(self, name: str) -> Optional[str]:
        """Return a handle for an existing partition, or None."""
        raise NotImplementedError

    def scan_rows(self, handle: str) -> Sequence[Row]:
        raise NotImplementedError

    def append_row(self, handle: str, row: Sequence[Any]) -> int:
        raise NotImplementedError

    def update_row(self, handle: str, index: int, row: Sequence[Any]) -> None:
        raise NotImplementedError

    def delete_row(self, handle: str, index: int) -> None:
        raise NotImplementedError

    def list_partitions(self, prefix: str = "") -> Set[str]:
        raise NotImplementedError

    def exclusive(self, handle: str) -> ContextManager[None]:
        """Hold the partition against writers in this and other processes."""
        raise NotImplementedError
