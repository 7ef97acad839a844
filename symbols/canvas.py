"""
symbols/canvas.py
Drawing surface with a path-based paint model

Primitives append outlines to the current path in device coordinates
(the active transform is applied when they are added). fill() and
stroke() paint the path with the current color and clear it. Each
paint call goes through its own transparent layer, so translucent
colors blend with what is already on the canvas.
"""

import math
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .config import CAPTION_FONT_SIZE

Color = Tuple[float, float, float, float]
FontFace = Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]


class TypefaceError(Exception):
    """Typeface could not be loaded or parsed."""


def load_typeface(path: Optional[Union[str, Path]] = None,
                  size: int = CAPTION_FONT_SIZE) -> FontFace:
    """
    Load the caption typeface.

    Without a path, Pillow's embedded default face is used at `size`.
    Any failure to read or parse the face raises TypefaceError.
    """
    try:
        if path is None:
            return ImageFont.load_default(size=size)
        return ImageFont.truetype(str(path), size)
    except (OSError, ValueError) as e:
        source = str(path) if path is not None else "<embedded>"
        raise TypefaceError(f"Could not load typeface {source}: {e}") from e


def radians(degrees: float) -> float:
    return math.radians(degrees)


def _translation(x: float, y: float) -> np.ndarray:
    return np.array([
        [1.0, 0.0, x],
        [0.0, 1.0, y],
        [0.0, 0.0, 1.0],
    ])


def _rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def _to_rgba8(color: Color) -> Tuple[int, int, int, int]:
    return tuple(int(round(min(1.0, max(0.0, c)) * 255)) for c in color)


def _faux_bold_width(font: FontFace) -> int:
    """Stroke width that emulates a bold weight for regular faces."""
    getname = getattr(font, "getname", None)
    if getname is None:
        return 1
    _family, style = getname()
    if style and "bold" in style.lower():
        return 0
    return 1


@dataclass
class SubPath:
    points: np.ndarray  # (N, 2) device coordinates
    closed: bool


@dataclass
class PaintState:
    """Everything push() saves and pop() restores."""
    color: Color = (0.0, 0.0, 0.0, 1.0)
    line_width: float = 1.0
    matrix: np.ndarray = field(default_factory=lambda: np.identity(3))
    font: Optional[FontFace] = None
    path: List[SubPath] = field(default_factory=list)

    def copy(self) -> "PaintState":
        return replace(self, matrix=self.matrix.copy(), path=list(self.path))


class Canvas:
    """
    Fixed-size RGBA surface, fully transparent until painted.

    Example:
        canvas = Canvas(900, 600)
        with canvas.state():
            canvas.set_rgb(1, 0, 0)
            canvas.draw_circle(100, 100, 20)
            canvas.fill()
        canvas.save_png("out.png")
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self._image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._state = PaintState()
        self._stack: List[PaintState] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.size

    @property
    def image(self) -> Image.Image:
        return self._image

    @property
    def depth(self) -> int:
        """Number of states currently pushed."""
        return len(self._stack)

    @property
    def color(self) -> Color:
        return self._state.color

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @property
    def matrix(self) -> np.ndarray:
        return self._state.matrix.copy()

    # -------------------------------------------------------------------------
    # Paint state
    # -------------------------------------------------------------------------

    def set_rgb(self, r: float, g: float, b: float):
        self._state.color = (r, g, b, 1.0)

    def set_rgba(self, r: float, g: float, b: float, a: float):
        self._state.color = (r, g, b, a)

    def set_line_width(self, width: float):
        self._state.line_width = width

    def set_font_face(self, font: FontFace):
        self._state.font = font

    def push(self):
        self._stack.append(self._state.copy())

    def pop(self):
        if not self._stack:
            raise IndexError("pop() without matching push()")
        self._state = self._stack.pop()

    @contextmanager
    def state(self):
        """Push on entry, pop on exit, however the block is left."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def translate(self, x: float, y: float):
        self._state.matrix = self._state.matrix @ _translation(x, y)

    def rotate(self, angle: float):
        self._state.matrix = self._state.matrix @ _rotation(angle)

    def rotate_about(self, angle: float, x: float, y: float):
        """Rotate by `angle` radians around user-space point (x, y)."""
        self.translate(x, y)
        self.rotate(angle)
        self.translate(-x, -y)

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        m = self._state.matrix
        return points @ m[:2, :2].T + m[:2, 2]

    # -------------------------------------------------------------------------
    # Path primitives
    # -------------------------------------------------------------------------

    def _add(self, points, closed: bool):
        pts = self.transform_points(np.asarray(points, dtype=np.float64))
        self._state.path.append(SubPath(points=pts, closed=closed))

    def draw_rectangle(self, x: float, y: float, w: float, h: float):
        self._add([(x, y), (x + w, y), (x + w, y + h), (x, y + h)], closed=True)

    def draw_ellipse(self, x: float, y: float, rx: float, ry: float):
        segments = max(32, int(math.ceil(2 * max(rx, ry))))
        t = np.linspace(0.0, 2 * math.pi, segments, endpoint=False)
        points = np.column_stack((x + rx * np.cos(t), y + ry * np.sin(t)))
        self._add(points, closed=True)

    def draw_circle(self, x: float, y: float, r: float):
        self.draw_ellipse(x, y, r, r)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float):
        self._add([(x1, y1), (x2, y2)], closed=False)

    def clear_path(self):
        self._state.path = []

    # -------------------------------------------------------------------------
    # Painting
    # -------------------------------------------------------------------------

    def _paint(self, paint_fn):
        layer = Image.new("RGBA", self.size, (0, 0, 0, 0))
        paint_fn(ImageDraw.Draw(layer), _to_rgba8(self._state.color))
        self._image.alpha_composite(layer)
        self.clear_path()

    def fill(self):
        """Fill every closed outline of the current path."""
        def paint(draw: ImageDraw.ImageDraw, ink):
            for sub in self._state.path:
                if len(sub.points) < 3:
                    continue
                draw.polygon([tuple(p) for p in sub.points], fill=ink)
        self._paint(paint)

    def stroke(self):
        """Stroke the current path with the current line width."""
        width = max(1, int(round(self._state.line_width)))

        def paint(draw: ImageDraw.ImageDraw, ink):
            for sub in self._state.path:
                points = [tuple(p) for p in sub.points]
                if sub.closed:
                    points.append(points[0])
                draw.line(points, fill=ink, width=width, joint="curve")
        self._paint(paint)

    def draw_string_anchored(self, text: str, x: float, y: float, ax: float, ay: float):
        """
        Draw text so that (x, y) falls at fraction (ax, ay) of its box.

        (0.5, 0.5) centres the text on the point. Only the anchor point is
        transformed; the glyphs are never rotated.
        """
        font = self._state.font
        if font is None:
            font = load_typeface()
        bold = _faux_bold_width(font)
        px, py = self.transform_points(np.array([[x, y]], dtype=np.float64))[0]

        def paint(draw: ImageDraw.ImageDraw, ink):
            left, top, right, bottom = draw.textbbox((0, 0), text, font=font, stroke_width=bold)
            w, h = right - left, bottom - top
            origin = (px - ax * w - left, py - ay * h - top)
            draw.text(origin, text, fill=ink, font=font, stroke_width=bold, stroke_fill=ink)

        path = self._state.path
        self._paint(paint)
        self._state.path = path

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def save_png(self, path: Union[str, Path]):
        """Encode the surface as PNG. Write errors propagate."""
        self._image.save(path, format="PNG")
