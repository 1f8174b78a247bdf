"""One end-to-end generation run.

    definitions -> build_table -> assemble_grid -> canvas

The canvas is prepared (fonts loaded) before anything is drawn. The header
column of role names is drawn first, then each state column is created
unless the canvas already has one with that label, then every row of every
column is drawn in role order. Table and plan are returned for inspection
and not kept anywhere else.
"""

from collections.abc import Iterable

from swatch_grid.core.grid import ColumnIndex, assemble_grid
from swatch_grid.core.table import DEFAULT_DELIMITER, build_table, count_unclassified
from swatch_grid.core.types import Canvas, ColorDefinition, RunResult


def generate(definitions: Iterable[ColorDefinition], canvas: Canvas, delimiter: str = DEFAULT_DELIMITER) -> RunResult:
    """Build the table and plan for definitions and materialise them on canvas."""
    definitions = list(definitions)

    # Labels depend on the font, so this must happen before any drawing
    canvas.prepare()

    table = build_table(definitions, delimiter)

    for role in table:
        canvas.header_label(role)

    index = ColumnIndex(canvas.existing_columns())
    plan = assemble_grid(table, known=index)

    for col in plan.columns:
        if col.state not in index:
            index.add(col.state, canvas.column(col.state))
        handle = index.get(col.state)
        for row in col.rows:
            canvas.row(handle, row)

    output = canvas.finish()
    return RunResult(
        table=table,
        plan=plan,
        output=output,
        skipped=count_unclassified(definitions, delimiter),
    )
