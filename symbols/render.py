"""
symbols/render.py
Picture assembly: caption, shapes, PNG output

Usage:
    from symbols.config import RenderConfig
    from symbols.render import draw_picture

    draw_picture(RenderConfig(output_path="random.png", num_objects=30))
"""

from pathlib import Path
from typing import Optional

from .canvas import Canvas, load_typeface, radians
from .config import (
    CAPTION,
    CAPTION_FONT_SIZE,
    CAPTION_OFFSET,
    CAPTION_RGB,
    CHANNEL_MAX,
    DEFAULT_CONFIG,
    MAX_EDGE,
    PICTURE_HEIGHT,
    PICTURE_WIDTH,
    RenderConfig,
)
from .logger import logger
from .palette import PaletteCycler
from .sampler import RandomSampler
from .shapes import PaintMode, ShapeDescriptor, ShapeGenerator, ShapeKind


def draw_shape(canvas: Canvas, shape: ShapeDescriptor) -> None:
    """Issue the canvas calls for one object. Canvas state is restored afterwards."""
    with canvas.state():
        canvas.set_rgba(*shape.color)
        canvas.set_line_width(shape.line_width)

        if shape.kind is ShapeKind.RECTANGLE:
            canvas.draw_rectangle(shape.x, shape.y, shape.width, shape.height)
        elif shape.kind is ShapeKind.CIRCLE:
            canvas.draw_circle(shape.x, shape.y, shape.width)
        elif shape.kind is ShapeKind.ELLIPSE:
            canvas.rotate_about(radians(shape.angle), shape.x, shape.y)
            canvas.draw_ellipse(shape.x, shape.y, shape.width, shape.height)
        elif shape.kind is ShapeKind.LINE:
            end_x, end_y = shape.end
            canvas.draw_line(shape.x, shape.y, end_x, end_y)
            canvas.stroke()
            return

        if shape.mode is PaintMode.FILL:
            canvas.fill()
        else:
            canvas.stroke()


def render_picture(
    config: RenderConfig = DEFAULT_CONFIG,
    sampler: Optional[RandomSampler] = None,
    palette: Optional[PaletteCycler] = None,
) -> Canvas:
    """
    Render caption and shapes onto a fresh canvas.

    Args:
        config: Run settings (object count, reseed, font)
        sampler: Random source; a default-seeded one when omitted
        palette: Color stream; a fresh cycler over COLOR_TRIPLETS when omitted

    Raises:
        TypefaceError: caption typeface could not be loaded
    """
    canvas = Canvas(PICTURE_WIDTH, PICTURE_HEIGHT)

    font = load_typeface(config.font_path, CAPTION_FONT_SIZE)
    canvas.set_font_face(font)

    canvas.set_rgb(*(c / CHANNEL_MAX for c in CAPTION_RGB))
    canvas.draw_string_anchored(
        CAPTION, PICTURE_WIDTH / 2, PICTURE_HEIGHT - CAPTION_OFFSET, 0.5, 0.5
    )

    if sampler is None:
        sampler = RandomSampler()
    if palette is None:
        palette = PaletteCycler()

    if config.reseed:
        seed = sampler.reseed()
        logger.render("Reseeded from clock", details=f"seed={seed}")
    else:
        logger.render("Using fixed seed", details=f"seed={sampler.seed}")

    generator = ShapeGenerator(palette, sampler, PICTURE_WIDTH, PICTURE_HEIGHT, MAX_EDGE)
    for i in range(config.num_objects):
        draw_shape(canvas, generator.describe(i))

    logger.render(f"Drew {config.num_objects} objects")
    return canvas


def draw_picture(
    config: RenderConfig = DEFAULT_CONFIG,
    sampler: Optional[RandomSampler] = None,
    palette: Optional[PaletteCycler] = None,
) -> Path:
    """Render and write the picture to config.output_path. Returns the path written."""
    canvas = render_picture(config, sampler=sampler, palette=palette)
    output_path = Path(config.output_path)
    canvas.save_png(output_path)
    logger.info(f"Wrote {output_path}", component="RENDER",
                details=f"{canvas.width}x{canvas.height}, {config.num_objects} objects")
    return output_path
