"""Turn a colour table into a rectangular layout plan.

Columns are discovered state-first: walk roles in table order, and within
each role its states in order; each state label becomes a column the first
time it is seen. Rows are then filled role-first: every column gets one row
per role in table role order, Absent where the role has no colour for that
state. Discovery is driven by states but filling is driven by the global
role list, which is what keeps the grid rectangular.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from swatch_grid.core.types import Absent, Column, LayoutPlan, Present, Row, Table


def discover_states(table: Table) -> list[str]:
    """State labels in role-major, state-minor first-sight order."""
    seen: dict[str, None] = {}
    for states in table.values():
        for state in states:
            if state not in seen:
                seen[state] = None
    return list(seen)


def build_rows(table: Table, state: str) -> tuple[Row, ...]:
    """One row per role for a single state column."""
    rows: list[Row] = []
    for role, states in table.items():
        cell = states.get(state)
        rows.append(Present(cell) if cell is not None else Absent(role=role, state=state))
    return tuple(rows)


def assemble_grid(table: Table, known: Iterable[str] = ()) -> LayoutPlan:
    """Build the layout plan for a table.

    `known` lists column labels the target container already holds, in its
    order. Those columns are not marked new but still get a full set of rows;
    they come first, followed by newly discovered states.
    """
    labels = dict.fromkeys(known)
    existing = set(labels)
    for state in discover_states(table):
        labels.setdefault(state)

    columns = tuple(Column(state=label, rows=build_rows(table, label), new=label not in existing) for label in labels)
    return LayoutPlan(roles=tuple(table), columns=columns)


class ColumnIndex:
    """Maps a column label to the handle the canvas gave back for it.

    Column identity is the label, so a column is only created once per label
    even when the container was already partly populated.
    """

    def __init__(self, existing: dict[str, Any] | None = None):
        self._handles: dict[str, Any] = dict(existing or {})

    def __contains__(self, label: str) -> bool:
        return label in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._handles)

    def get(self, label: str) -> Any:
        return self._handles[label]

    def add(self, label: str, handle: Any) -> None:
        if label in self._handles:
            raise KeyError(f'Column already exists: {label}')
        self._handles[label] = handle
