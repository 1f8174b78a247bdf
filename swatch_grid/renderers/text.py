"""Print the swatch grid as a plain-text table.

One line per role, one column per state. Defined colours show their style
id; empty combinations show 'No colour'.

Writes to --out if given, otherwise prints to stdout.

Example:
    swatch-grid styles.json --renderer text
"""

from pathlib import Path
from typing import Any

from swatch_grid.core.types import Present, Renderer, Row

renderer = Renderer(
    name='text',
    help='Print the swatch grid as a plain-text table.',
)


@renderer.canvas
class TextCanvas:
    def __init__(self, settings: Any):
        out = getattr(settings, 'out', None)
        self.out = Path(out) if out else None
        self.roles: list[str] = []
        self.columns: list[tuple[str, list[Row]]] = []

    def prepare(self) -> None:
        pass

    def existing_columns(self) -> dict[str, int]:
        return {label: i for i, (label, _rows) in enumerate(self.columns)}

    def header_label(self, role: str) -> None:
        self.roles.append(role)

    def column(self, label: str) -> int:
        self.columns.append((label, []))
        return len(self.columns) - 1

    def row(self, column: int, row: Row) -> None:
        self.columns[column][1].append(row)

    def render(self) -> str:
        header = [''] + [label for label, _rows in self.columns]
        grid = [header]
        for i, role in enumerate(self.roles):
            line = [role]
            for _label, rows in self.columns:
                row = rows[i] if i < len(rows) else None
                line.append(row.cell.ref_id if isinstance(row, Present) else 'No colour')
            grid.append(line)

        widths = [max(len(line[c]) for line in grid) for c in range(len(header))]
        return '\n'.join('  '.join(cell.ljust(w) for cell, w in zip(line, widths)).rstrip() for line in grid)

    def finish(self) -> str | Path:
        text = self.render()
        if self.out is None:
            return text
        self.out.parent.mkdir(parents=True, exist_ok=True)
        self.out.write_text(text + '\n', encoding='utf-8')
        return self.out
