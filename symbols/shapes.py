"""
symbols/shapes.py
Per-object style selection

Shape kind cycles with index % 7, paint mode with index % 5. The two
cycles rarely line up over a typical object count, which keeps the
picture from repeating a short pattern.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import (
    CHANNEL_MAX,
    CIRCLE_ALPHA_RANGE,
    ELLIPSE_ANGLE_RANGE,
    LINE_WIDTH_RANGE,
    MAX_EDGE,
    PICTURE_HEIGHT,
    PICTURE_WIDTH,
    SHAPE_EDGE_MIN,
)
from .palette import PaletteCycler
from .sampler import RandomSampler


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"


class PaintMode(Enum):
    FILL = "fill"
    STROKE = "stroke"


_KIND_CYCLE = (
    ShapeKind.RECTANGLE,  # 0
    ShapeKind.CIRCLE,     # 1
    ShapeKind.ELLIPSE,    # 2
    ShapeKind.RECTANGLE,  # 3
    ShapeKind.ELLIPSE,    # 4
    ShapeKind.CIRCLE,     # 5
    ShapeKind.LINE,       # 6
)

_MODE_CYCLE = (
    PaintMode.FILL,    # 0
    PaintMode.STROKE,  # 1
    PaintMode.STROKE,  # 2
    PaintMode.FILL,    # 3
    PaintMode.STROKE,  # 4
)


def shape_kind_for(index: int) -> ShapeKind:
    """Shape kind for an object index (index % 7)."""
    return _KIND_CYCLE[index % len(_KIND_CYCLE)]


def paint_mode_for(index: int) -> PaintMode:
    """Paint mode for an object index (index % 5). Lines ignore this."""
    return _MODE_CYCLE[index % len(_MODE_CYCLE)]


@dataclass(frozen=True)
class ShapeDescriptor:
    """
    Fully resolved parameters for one object.

    For circles `width` is the radius; for ellipses `width`/`height` are
    the radii. `end` is only set for lines. `angle` is in degrees and is
    applied about the anchor (x, y).
    """
    index: int
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    color: Tuple[float, float, float, float]
    line_width: float
    mode: PaintMode
    angle: float = 0.0
    end: Optional[Tuple[float, float]] = None


class ShapeGenerator:
    """
    Turns object indices into ShapeDescriptors.

    Draw order per object is fixed: three palette channels, line width,
    anchor, width, height, then the kind-specific extra (circle alpha,
    ellipse angle or line end point). Changing it changes every picture.
    """

    def __init__(
        self,
        palette: PaletteCycler,
        sampler: RandomSampler,
        width: int = PICTURE_WIDTH,
        height: int = PICTURE_HEIGHT,
        max_edge: int = MAX_EDGE,
    ):
        self.palette = palette
        self.sampler = sampler
        self.width = width
        self.height = height
        self.max_edge = max_edge

    def _anchor(self) -> Tuple[float, float]:
        return self.sampler.point(self.max_edge, self.width, self.height)

    def describe(self, index: int) -> ShapeDescriptor:
        r, g, b = (c / CHANNEL_MAX for c in self.palette.next_rgb())
        alpha = 1.0

        line_width = self.sampler.uniform(*LINE_WIDTH_RANGE)

        x, y = self._anchor()
        w = self.sampler.uniform(SHAPE_EDGE_MIN, self.max_edge)
        h = self.sampler.uniform(SHAPE_EDGE_MIN, self.max_edge)

        kind = shape_kind_for(index)
        angle = 0.0
        end = None

        if kind is ShapeKind.CIRCLE:
            alpha = self.sampler.uniform(*CIRCLE_ALPHA_RANGE) / 10
        elif kind is ShapeKind.ELLIPSE:
            angle = self.sampler.uniform(*ELLIPSE_ANGLE_RANGE)
        elif kind is ShapeKind.LINE:
            end = self._anchor()

        # Lines are never filled
        if kind is ShapeKind.LINE:
            mode = PaintMode.STROKE
        else:
            mode = paint_mode_for(index)

        return ShapeDescriptor(
            index=index,
            kind=kind,
            x=x,
            y=y,
            width=w,
            height=h,
            color=(r, g, b, alpha),
            line_width=line_width,
            mode=mode,
            angle=angle,
            end=end,
        )
