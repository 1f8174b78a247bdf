"""Layout options for renderers.

The pipeline never reads these; the image renderer stacks frames along
`layout_mode`, sizes them by their axis sizing modes and places text by its
alignment. The presets describe the swatch sheet: a horizontal container
holding a header column of role names followed by one vertical column per
state.
"""

from dataclasses import dataclass
from enum import Enum


class LayoutMode(Enum):
    HORIZONTAL = 'HORIZONTAL'
    VERTICAL = 'VERTICAL'


class SizingMode(Enum):
    AUTO = 'AUTO'
    FIXED = 'FIXED'


class TextAlign(Enum):
    LEFT = 'LEFT'
    TOP = 'TOP'
    CENTER = 'CENTER'
    RIGHT = 'RIGHT'
    BOTTOM = 'BOTTOM'


@dataclass(frozen=True)
class FrameStyle:
    layout_mode: LayoutMode = LayoutMode.VERTICAL
    item_spacing: int = 8
    padding: tuple[int, int, int, int] = (8, 8, 8, 8)  # (left, top, right, bottom)
    counter_axis_sizing: SizingMode = SizingMode.AUTO
    primary_axis_sizing: SizingMode = SizingMode.AUTO
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class TextStyle:
    font_size: int = 16
    align_horizontal: TextAlign = TextAlign.LEFT
    align_vertical: TextAlign = TextAlign.TOP
    width: int = 100
    height: int = 100
    opacity: float = 1.0


CONTAINER = FrameStyle(layout_mode=LayoutMode.HORIZONTAL)
STATE_COLUMN = FrameStyle()
# Top padding pushes role names down past the state headings
HEADER_COLUMN = FrameStyle(padding=(8, 80, 8, 8))
SWATCH_FRAME = FrameStyle(
    counter_axis_sizing=SizingMode.FIXED,
    primary_axis_sizing=SizingMode.FIXED,
    padding=(0, 0, 0, 0),
    width=100,
    height=100,
)

STATE_HEADING = TextStyle(width=120, height=64)
ROLE_LABEL = TextStyle()
SWATCH_LABEL = TextStyle(font_size=8)
ABSENT_LABEL = TextStyle(font_size=8, opacity=0.2)

SWATCH_SIZE = 64
STROKE_WIDTH = 1
STROKE_COLOUR = (0, 0, 0, 255)
TEXT_COLOUR = (0, 0, 0, 255)
BACKGROUND = (255, 255, 255, 255)
