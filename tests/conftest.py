"""Shared fixtures: the Light/Dark example styles and a recording canvas."""

from typing import Any

import pytest
from swatch_grid.core.types import ColorDefinition, Row

RED = {'type': 'SOLID', 'color': {'r': 1.0, 'g': 0.0, 'b': 0.0}}
GREEN = {'type': 'SOLID', 'color': {'r': 0.0, 'g': 1.0, 'b': 0.0}}
BLUE = {'type': 'SOLID', 'color': {'r': 0.0, 'g': 0.0, 'b': 1.0}}


@pytest.fixture
def example_definitions() -> list[ColorDefinition]:
    return [
        ColorDefinition(name='Light/Surface/Success/Secondary', id='A', value=RED),
        ColorDefinition(name='Light/Text/Success/Secondary', id='B', value=GREEN),
        ColorDefinition(name='Dark/Surface/Danger', id='C', value=BLUE),
        ColorDefinition(name='NoSlashName', id='D', value=RED),
    ]


class RecordingCanvas:
    """Canvas that records every call, optionally starting with existing columns."""

    def __init__(self, existing: list[str] | None = None):
        self.calls: list[tuple[Any, ...]] = []
        self.prepared = False
        self.handles: dict[str, str] = {label: f'col:{label}' for label in existing or []}

    def prepare(self) -> None:
        self.prepared = True
        self.calls.append(('prepare',))

    def existing_columns(self) -> dict[str, str]:
        return dict(self.handles)

    def header_label(self, role: str) -> None:
        assert self.prepared
        self.calls.append(('header', role))

    def column(self, label: str) -> str:
        assert self.prepared
        handle = f'col:{label}'
        self.handles[label] = handle
        self.calls.append(('column', label))
        return handle

    def row(self, column: str, row: Row) -> None:
        assert self.prepared
        self.calls.append(('row', column, row))

    def finish(self) -> str:
        self.calls.append(('finish',))
        return 'done'

    def named(self, kind: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


SETTING_VARS = [
    'SWATCH_GRID_SOURCE',
    'SWATCH_GRID_RENDERER',
    'SWATCH_GRID_OUT',
    'SWATCH_GRID_DELIMITER',
    'SWATCH_GRID_FONT',
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # setenv first so monkeypatch also undoes whatever load_env() writes
    for name in SETTING_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch
