"""Shared types for swatch-grid: ColorDefinition, Cell, Table, LayoutPlan, Renderer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

ABSENT_LABEL = 'No colour'


@dataclass(frozen=True)
class ColorDefinition:
    """A named colour from the source, e.g. 'Light/Surface/Success/Secondary'."""

    name: str
    id: str
    value: Any = None  # opaque paint, passed through untouched


@dataclass(frozen=True)
class Cell:
    """The colour assigned to one (role, state) pair."""

    role: str
    state: str
    ref_id: str
    value: tuple[Any, ...] = ()


# role -> state -> Cell, both levels in first-seen order
Table = dict[str, dict[str, Cell]]


@dataclass(frozen=True)
class Present:
    """A grid row backed by a defined colour."""

    cell: Cell
    present = True

    @property
    def role(self) -> str:
        return self.cell.role

    @property
    def state(self) -> str:
        return self.cell.state

    @property
    def label(self) -> str:
        return f'{self.cell.role} - {self.cell.state}'


@dataclass(frozen=True)
class Absent:
    """A grid row for a role with no colour in this state."""

    role: str
    state: str
    present = False

    @property
    def label(self) -> str:
        return ABSENT_LABEL


Row = Union[Present, Absent]


@dataclass(frozen=True)
class Column:
    """One state column: a heading plus one row per role."""

    state: str
    rows: tuple[Row, ...] = ()
    new: bool = True  # False when the container already had this label


@dataclass(frozen=True)
class LayoutPlan:
    """Rectangular grid of state columns by role rows."""

    roles: tuple[str, ...] = ()
    columns: tuple[Column, ...] = ()

    @property
    def states(self) -> tuple[str, ...]:
        return tuple(col.state for col in self.columns)

    @property
    def row_count(self) -> int:
        return sum(len(col.rows) for col in self.columns)

    def is_rectangular(self) -> bool:
        """True when every column lists every role, in role order."""
        return all(tuple(row.role for row in col.rows) == self.roles for col in self.columns)


class Canvas(Protocol):
    """The drawing surface a renderer provides.

    Handles returned by column() are opaque to the pipeline; it only
    passes them back to row().
    """

    def prepare(self) -> None: ...

    def existing_columns(self) -> dict[str, Any]: ...

    def header_label(self, role: str) -> None: ...

    def column(self, label: str) -> Any: ...

    def row(self, column: Any, row: Row) -> None: ...

    def finish(self) -> Any: ...


class Renderer:
    """A self-registering output backend.

    Usage in a renderer module:

        renderer = Renderer(name='text', help='Print the grid as text')

        @renderer.canvas
        class TextCanvas:
            def __init__(self, settings): ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self.doc = ''  # filled from the module docstring on discovery
        self._canvas_cls: Callable | None = None

    def canvas(self, cls: Callable) -> Callable:
        """Decorator to register the canvas class."""
        self._canvas_cls = cls
        return cls

    def open(self, settings: Any) -> Canvas:
        """Create a fresh canvas for one run."""
        if self._canvas_cls is None:
            raise RuntimeError(f'Renderer {self.name} has no canvas')
        return self._canvas_cls(settings)


@dataclass
class RunResult:
    """Everything one generation run produced."""

    table: Table = field(default_factory=dict)
    plan: LayoutPlan = field(default_factory=LayoutPlan)
    output: Any = None
    skipped: int = 0
