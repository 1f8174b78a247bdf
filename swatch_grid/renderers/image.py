"""Draw the swatch sheet as a PNG with Pillow.

Layout, left to right: a header column of role names, then one column per
state. Each state column has a heading and one 100×100 swatch per role:

  - colour defined: 64×64 filled square, 1px black border,
    label '<role> - <state>'
  - no colour: no square, label 'No colour' at 20% opacity

Labels use SWATCH_GRID_FONT / --font (a TrueType file) if set, otherwise
Pillow's built-in font. A font path that cannot be loaded aborts the run.

Output goes to SWATCH_GRID_OUT / --out (default swatches.png).

Example:
    swatch-grid styles.json --renderer image --out sheet.png
"""

from pathlib import Path
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from swatch_grid.core import layout
from swatch_grid.core.paint import cell_fill
from swatch_grid.core.types import Present, Renderer, Row

renderer = Renderer(
    name='image',
    help='Draw the swatch grid to a PNG (Pillow).',
)

DEFAULT_OUT = 'swatches.png'


def load_font(path: str | None, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Load a TrueType font, or Pillow's default at the given size."""
    if path:
        return ImageFont.truetype(path, size)
    return ImageFont.load_default(size=size)


Size = tuple[int, int]


def measure(frame: layout.FrameStyle, children: list[Size]) -> Size:
    """Outer size of a frame stacking children along its layout mode."""
    horizontal = frame.layout_mode is layout.LayoutMode.HORIZONTAL
    along = [w if horizontal else h for w, h in children]
    across = [h if horizontal else w for w, h in children]
    primary = sum(along) + frame.item_spacing * max(len(children) - 1, 0)
    counter = max(across, default=0)

    left, top, right, bottom = frame.padding
    width, height = (primary, counter) if horizontal else (counter, primary)
    width += left + right
    height += top + bottom

    fixed_width = frame.primary_axis_sizing if horizontal else frame.counter_axis_sizing
    fixed_height = frame.counter_axis_sizing if horizontal else frame.primary_axis_sizing
    if fixed_width is layout.SizingMode.FIXED:
        width = frame.width
    if fixed_height is layout.SizingMode.FIXED:
        height = frame.height
    return width, height


def offsets(frame: layout.FrameStyle, children: list[Size]) -> list[tuple[int, int]]:
    """Top-left position of each child inside the frame."""
    horizontal = frame.layout_mode is layout.LayoutMode.HORIZONTAL
    left, top, _right, _bottom = frame.padding
    x, y = left, top
    result = []
    for w, h in children:
        result.append((x, y))
        if horizontal:
            x += w + frame.item_spacing
        else:
            y += h + frame.item_spacing
    return result


def _align(mode: layout.TextAlign, box: int, ink: int) -> int:
    if mode is layout.TextAlign.CENTER:
        return (box - ink) // 2
    if mode in (layout.TextAlign.RIGHT, layout.TextAlign.BOTTOM):
        return box - ink
    return 0


@renderer.canvas
class ImageCanvas:
    def __init__(self, settings: Any):
        self.out = Path(getattr(settings, 'out', None) or DEFAULT_OUT)
        self.font_path = getattr(settings, 'font', None)
        self.fonts: dict[int, Any] = {}
        self.roles: list[str] = []
        self.columns: list[tuple[str, list[Row]]] = []

    def prepare(self) -> None:
        sizes = {layout.STATE_HEADING.font_size, layout.ROLE_LABEL.font_size, layout.SWATCH_LABEL.font_size}
        self.fonts = {size: load_font(self.font_path, size) for size in sizes}

    def existing_columns(self) -> dict[str, int]:
        return {label: i for i, (label, _rows) in enumerate(self.columns)}

    def header_label(self, role: str) -> None:
        self.roles.append(role)

    def column(self, label: str) -> int:
        self.columns.append((label, []))
        return len(self.columns) - 1

    def row(self, column: int, row: Row) -> None:
        self.columns[column][1].append(row)

    def finish(self) -> Path:
        image = self.render()
        self.out.parent.mkdir(parents=True, exist_ok=True)
        image.save(self.out)
        return self.out

    # -- drawing --

    def render(self) -> Image.Image:
        """Lay out and draw everything collected so far."""
        if not self.fonts:
            raise RuntimeError('image canvas used before prepare()')

        header = self.compose(layout.HEADER_COLUMN, [self.text(role, layout.ROLE_LABEL) for role in self.roles])
        columns = [self._column(label, rows) for label, rows in self.columns]
        return self.compose(layout.CONTAINER, [header] + columns, background=layout.BACKGROUND)

    def compose(
        self,
        frame: layout.FrameStyle,
        children: list[Image.Image],
        background: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> Image.Image:
        """Stack child images inside a frame. Children are clipped to it."""
        sizes = [child.size for child in children]
        image = Image.new('RGBA', measure(frame, sizes), background)
        for child, (x, y) in zip(children, offsets(frame, sizes)):
            visible = (min(child.width, image.width - x), min(child.height, image.height - y))
            if visible[0] > 0 and visible[1] > 0:
                image.alpha_composite(child.crop((0, 0) + visible), dest=(x, y))
        return image

    def _column(self, label: str, rows: list[Row]) -> Image.Image:
        heading = self.text(label, layout.STATE_HEADING)
        return self.compose(layout.STATE_COLUMN, [heading] + [self._swatch(row) for row in rows])

    def _swatch(self, row: Row) -> Image.Image:
        size = layout.SWATCH_SIZE
        rect = Image.new('RGBA', (size, size), (0, 0, 0, 0))
        if isinstance(row, Present):
            ImageDraw.Draw(rect).rectangle(
                (0, 0, size - 1, size - 1),
                fill=cell_fill(row.cell.value),
                outline=layout.STROKE_COLOUR,
                width=layout.STROKE_WIDTH,
            )
            label = self.text(row.label, layout.SWATCH_LABEL)
        else:
            label = self.text(row.label, layout.ABSENT_LABEL)
        return self.compose(layout.SWATCH_FRAME, [rect, label])

    def text(self, text: str, style: layout.TextStyle) -> Image.Image:
        """Render text into a transparent box of the style's size, aligned within it."""
        box = Image.new('RGBA', (style.width, style.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(box)
        font = self.fonts[style.font_size]
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        x = _align(style.align_horizontal, style.width, right - left) - left
        y = _align(style.align_vertical, style.height, bottom - top) - top
        r, g, b, a = layout.TEXT_COLOUR
        draw.text((x, y), text, font=font, fill=(r, g, b, round(a * style.opacity)))
        return box
