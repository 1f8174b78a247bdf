"""Group named colour definitions into a role -> state -> Cell table.

Names are split on the delimiter:

    Light/Surface/Success/Secondary
    ^^^^^ theme, discarded
          ^^^^^^^ role
                  ^^^^^^^^^^^^^^^^^ state, joined as 'Success - Secondary'

Names without a delimiter cannot be classified and are skipped.
A later definition for the same (role, state) replaces the earlier one.
"""

from collections.abc import Iterable

from swatch_grid.core.types import Cell, ColorDefinition, Table

DEFAULT_DELIMITER = '/'
STATE_SEPARATOR = ' - '


def split_name(name: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str] | None:
    """Return (role, state) for a definition name, or None if it has no hierarchy."""
    if delimiter not in name:
        return None
    segments = name.split(delimiter)
    return segments[1], STATE_SEPARATOR.join(segments[2:])


def build_table(definitions: Iterable[ColorDefinition], delimiter: str = DEFAULT_DELIMITER) -> Table:
    """Build the colour table from definitions, in input order."""
    table: Table = {}
    for definition in definitions:
        key = split_name(definition.name, delimiter)
        if key is None:
            continue
        role, state = key
        if role not in table:
            table[role] = {}
        table[role][state] = Cell(
            role=role,
            state=state,
            ref_id=definition.id,
            value=(definition.value,),
        )
    return table


def count_unclassified(definitions: Iterable[ColorDefinition], delimiter: str = DEFAULT_DELIMITER) -> int:
    """Number of definitions build_table() would skip."""
    return sum(1 for d in definitions if delimiter not in d.name)
