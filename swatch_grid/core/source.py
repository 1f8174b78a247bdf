"""Load colour definitions from a JSON paint-style export.

Accepted shapes:

    [{"name": "Light/Surface/Default", "id": "S:1", "paints": [{...}]}, ...]
    {"styles": [ ...same entries... ]}

`id` defaults to the name when missing or null. The first entry of
`paints` is the definition's paint; a plain `value` key may be used
instead. Paints are not inspected.
"""

import json
from pathlib import Path
from typing import Any

from swatch_grid.core.types import ColorDefinition


class SourceError(ValueError):
    """The definitions file is not in a recognised shape."""


def load_definitions(path: str | Path) -> list[ColorDefinition]:
    """Read definitions from a JSON file on disk."""
    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SourceError(f'{path}: invalid JSON: {e}') from e
    return parse_definitions(data)


def parse_definitions(data: Any) -> list[ColorDefinition]:
    """Build definitions from already-decoded JSON."""
    if isinstance(data, dict):
        if 'styles' not in data:
            raise SourceError('expected a list of styles or an object with a "styles" list')
        data = data['styles']
    if not isinstance(data, list):
        raise SourceError('styles must be a list')
    return [_parse_entry(i, entry) for i, entry in enumerate(data)]


def _parse_entry(index: int, entry: Any) -> ColorDefinition:
    if not isinstance(entry, dict):
        raise SourceError(f'style #{index}: expected an object, got {type(entry).__name__}')

    name = entry.get('name')
    if not isinstance(name, str):
        raise SourceError(f'style #{index}: missing "name"')

    ref_id = entry.get('id')
    if ref_id is None:
        ref_id = name
    elif not isinstance(ref_id, str):
        ref_id = str(ref_id)

    if 'paints' in entry:
        paints = entry['paints']
        if not isinstance(paints, list) or not paints:
            raise SourceError(f'style #{index} ({name}): "paints" must be a non-empty list')
        value = paints[0]
    else:
        value = entry.get('value')

    return ColorDefinition(name=name, id=ref_id, value=value)
