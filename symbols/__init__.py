"""
Random Symbols - generative shape pictures

Draws a caption and N randomly placed, colored and styled primitives
(rectangles, circles, ellipses, lines) onto a 900x600 canvas and saves
it as PNG. Pictures are reproducible unless reseeded from the clock.

Usage:
    python -m symbols -o random.png -n 30
    python -m symbols -s
"""

__version__ = "0.1.0"

from .config import RenderConfig, DEFAULT_CONFIG, PICTURE_WIDTH, PICTURE_HEIGHT, MAX_EDGE
from .palette import PaletteCycler
from .sampler import RandomSampler
from .shapes import (
    ShapeKind,
    PaintMode,
    ShapeDescriptor,
    ShapeGenerator,
    shape_kind_for,
    paint_mode_for,
)
from .canvas import Canvas, TypefaceError, load_typeface
from .render import draw_shape, render_picture, draw_picture

__all__ = [
    # Version
    "__version__",
    # Config
    "RenderConfig",
    "DEFAULT_CONFIG",
    "PICTURE_WIDTH",
    "PICTURE_HEIGHT",
    "MAX_EDGE",
    # Color / randomness
    "PaletteCycler",
    "RandomSampler",
    # Shapes
    "ShapeKind",
    "PaintMode",
    "ShapeDescriptor",
    "ShapeGenerator",
    "shape_kind_for",
    "paint_mode_for",
    # Canvas
    "Canvas",
    "TypefaceError",
    "load_typeface",
    # Rendering
    "draw_shape",
    "render_picture",
    "draw_picture",
]
