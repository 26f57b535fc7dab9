"""A collection of cells decoded from one b-tree page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, BinaryIO, Generic, Iterable, Optional, Sequence, TypeVar

from toysqlite.filter import create_record_filter
from toysqlite.ordered_set import OrderedSet
from toysqlite.parser import Comparison

__all__ = ["CellTable"]

C = TypeVar("C")


@dataclass
class CellTable(Generic[C]):
    """Cells of one page, in cell pointer order."""

    cells: list[C] = field(default_factory=list)
    columns: Optional[OrderedSet[str]] = None

    @classmethod
    def read(
        cls, reader: BinaryIO, cell_pointers: Iterable[int], cell_type: Any
    ) -> "CellTable[C]":
        """Decode one ``cell_type`` cell at each offset in ``cell_pointers``."""
        cells = []
        for pointer in cell_pointers:
            reader.seek(pointer)
            cells.append(cell_type.read(reader))
        return cls(cells)

    def filter_cells(
        self, ordered_column_names: Sequence[str], comparison: Comparison
    ) -> list[C]:
        """Return the cells whose record matches ``comparison``."""
        predicate = create_record_filter(ordered_column_names, comparison)
        return [cell for cell in self.cells if predicate(cell.record)]