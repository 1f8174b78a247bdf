"""Emit the swatch grid as JSON.

    {"roles": [...], "columns": [{"state": ..., "rows": [{"role", "label", "present", "id", "value"}]}]}

Paint values are copied through as they appeared in the source file.
Writes to --out if given, otherwise prints to stdout.

Example:
    swatch-grid styles.json --renderer json --out grid.json
"""

import json
from pathlib import Path
from typing import Any

from swatch_grid.core.report import row_to_dict
from swatch_grid.core.types import Renderer, Row

renderer = Renderer(
    name='json',
    help='Emit the swatch grid (roles, columns, rows) as JSON.',
)


@renderer.canvas
class JsonCanvas:
    def __init__(self, settings: Any):
        out = getattr(settings, 'out', None)
        self.out = Path(out) if out else None
        self.roles: list[str] = []
        self.columns: list[dict[str, Any]] = []

    def prepare(self) -> None:
        pass

    def existing_columns(self) -> dict[str, int]:
        return {col['state']: i for i, col in enumerate(self.columns)}

    def header_label(self, role: str) -> None:
        self.roles.append(role)

    def column(self, label: str) -> int:
        self.columns.append({'state': label, 'rows': []})
        return len(self.columns) - 1

    def row(self, column: int, row: Row) -> None:
        self.columns[column]['rows'].append(row_to_dict(row))

    def finish(self) -> str | Path:
        text = json.dumps({'roles': self.roles, 'columns': self.columns}, indent=2, default=str)
        if self.out is None:
            return text
        self.out.parent.mkdir(parents=True, exist_ok=True)
        self.out.write_text(text + '\n', encoding='utf-8')
        return self.out
