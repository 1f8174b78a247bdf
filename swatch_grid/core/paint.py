"""Resolve opaque paints to RGBA for drawing.

Paints are passed through the table untouched; only renderers that draw
pixels need to look inside them. Understood forms:

    {'type': 'SOLID', 'color': {'r': 0.2, 'g': 0.4, 'b': 1.0}, 'opacity': 0.5}
    '#3366ff' / '#36f' / '#3366ff80'
    [51, 102, 255] / [51, 102, 255, 128]

Anything else (gradients, images, None) resolves to opaque black, which is
what an unresolved fill looks like on the sheet.
"""

from typing import Any

import numpy as np

BLACK = (0, 0, 0, 255)


def hex_to_rgba(value: str) -> tuple[int, int, int, int]:
    """Parse #rgb, #rrggbb or #rrggbbaa. Returns opaque black if unparseable."""
    h = value.lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) == 6:
        h += 'ff'
    if len(h) != 8:
        return BLACK
    try:
        r, g, b, a = (int(h[i : i + 2], 16) for i in (0, 2, 4, 6))
    except ValueError:
        return BLACK
    return (r, g, b, a)


def _unit_to_byte(channels: list[float]) -> tuple[int, ...]:
    arr = np.clip(np.rint(np.asarray(channels, dtype=float) * 255.0), 0, 255).astype(int)
    return tuple(int(c) for c in arr)


def paint_to_rgba(paint: Any) -> tuple[int, int, int, int]:
    """Resolve a paint to an (r, g, b, a) byte tuple."""
    if isinstance(paint, str):
        return hex_to_rgba(paint)

    if isinstance(paint, dict):
        if paint.get('type', 'SOLID') != 'SOLID':
            return BLACK
        color = paint.get('color')
        if not isinstance(color, dict):
            return BLACK
        try:
            channels = [float(color['r']), float(color['g']), float(color['b'])]
            alpha = float(color.get('a', 1.0)) * float(paint.get('opacity', 1.0))
        except (KeyError, TypeError, ValueError):
            return BLACK
        r, g, b, a = _unit_to_byte(channels + [alpha])
        return (r, g, b, a)

    if isinstance(paint, (list, tuple)) and len(paint) in (3, 4):
        try:
            arr = np.clip(np.asarray(paint, dtype=float), 0, 255).astype(int)
        except (TypeError, ValueError):
            return BLACK
        r, g, b = (int(c) for c in arr[:3])
        a = int(arr[3]) if len(arr) == 4 else 255
        return (r, g, b, a)

    return BLACK


def cell_fill(value: tuple[Any, ...]) -> tuple[int, int, int, int]:
    """Fill colour for a cell value: its first paint, or black when it has none."""
    if not value:
        return BLACK
    return paint_to_rgba(value[0])
