"""
tests/test_canvas.py
Tests for symbols/canvas.py paint model

Pixels are inspected through numpy arrays of the Pillow surface.
"""

import math

import numpy as np
import pytest
from PIL import Image

from symbols.canvas import Canvas, TypefaceError, load_typeface, radians


def _pixels(canvas):
    return np.array(canvas.image)


def _alpha(canvas):
    return _pixels(canvas)[:, :, 3]


class TestSurface:

    def test_size(self):
        canvas = Canvas(900, 600)
        assert canvas.size == (900, 600)
        assert _pixels(canvas).shape == (600, 900, 4)

    def test_starts_transparent(self):
        assert _alpha(Canvas(50, 40)).max() == 0


class TestPainting:

    def test_fill_rectangle(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 0, 0)
        canvas.draw_rectangle(10, 10, 20, 20)
        canvas.fill()
        px = _pixels(canvas)
        assert tuple(px[20, 20]) == (255, 0, 0, 255)
        assert px[50, 50, 3] == 0

    def test_stroke_rectangle_leaves_interior(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(0, 0, 1)
        canvas.set_line_width(2)
        canvas.draw_rectangle(10, 10, 40, 40)
        canvas.stroke()
        alpha = _alpha(canvas)
        assert alpha[30, 10] == 255  # left edge
        assert alpha[30, 30] == 0    # interior

    def test_paint_clears_path(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 0, 0)
        canvas.draw_rectangle(10, 10, 20, 20)
        canvas.fill()
        before = _pixels(canvas).copy()
        canvas.set_rgb(0, 1, 0)
        canvas.fill()
        canvas.stroke()
        assert np.array_equal(before, _pixels(canvas))

    def test_translucent_fill(self):
        canvas = Canvas(100, 100)
        canvas.set_rgba(1, 1, 1, 0.5)
        canvas.draw_circle(50, 50, 20)
        canvas.fill()
        assert 126 <= _alpha(canvas)[50, 50] <= 129

    def test_translucent_over_opaque_blends(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 0, 0)
        canvas.draw_rectangle(0, 0, 100, 100)
        canvas.fill()
        canvas.set_rgba(0, 0, 1, 0.5)
        canvas.draw_circle(50, 50, 20)
        canvas.fill()
        r, g, b, a = _pixels(canvas)[50, 50]
        assert a == 255
        assert 100 < r < 160
        assert 100 < b < 160

    def test_circle_extent(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.draw_circle(50, 50, 20)
        canvas.fill()
        alpha = _alpha(canvas)
        assert alpha[50, 68] == 255
        assert alpha[50, 75] == 0
        assert alpha[62, 62] == 255  # inside at 45 degrees
        assert alpha[66, 66] == 0    # outside at 45 degrees

    def test_fill_ignores_lines(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.draw_line(10, 10, 90, 90)
        canvas.fill()
        assert _alpha(canvas).max() == 0

    def test_stroke_line(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.set_line_width(3)
        canvas.draw_line(10, 50, 90, 50)
        canvas.stroke()
        alpha = _alpha(canvas)
        assert alpha[50, 50] == 255
        assert alpha[40, 50] == 0


class TestTransforms:

    def test_radians(self):
        assert radians(180) == pytest.approx(math.pi)

    def test_rotate_about_anchor(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.rotate_about(radians(90), 50, 50)
        canvas.draw_rectangle(50, 50, 20, 4)
        canvas.fill()
        alpha = _alpha(canvas)
        # Horizontal bar turned into a vertical one hanging below the anchor
        assert alpha[60, 48] == 255
        assert alpha[52, 60] == 0

    def test_transform_applies_when_drawing(self):
        canvas = Canvas(100, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.translate(40, 0)
        canvas.draw_rectangle(0, 0, 10, 10)
        canvas.translate(-40, 0)
        canvas.fill()
        alpha = _alpha(canvas)
        assert alpha[5, 45] == 255
        assert alpha[5, 5] == 0


class TestStateStack:

    def test_push_pop_restores(self):
        canvas = Canvas(10, 10)
        canvas.set_rgb(1, 0, 0)
        canvas.set_line_width(3)
        canvas.push()
        canvas.set_rgba(0, 1, 0, 0.5)
        canvas.set_line_width(7)
        canvas.rotate_about(1.0, 5, 5)
        canvas.pop()
        assert canvas.color == (1, 0, 0, 1.0)
        assert canvas.line_width == 3
        assert np.array_equal(canvas.matrix, np.identity(3))

    def test_state_context_restores_on_exception(self):
        canvas = Canvas(10, 10)
        with pytest.raises(RuntimeError):
            with canvas.state():
                canvas.set_line_width(9)
                assert canvas.depth == 1
                raise RuntimeError("boom")
        assert canvas.depth == 0
        assert canvas.line_width == 1.0

    def test_state_context_restores_on_early_return(self):
        canvas = Canvas(10, 10)

        def draw():
            with canvas.state():
                canvas.set_rgb(0, 0, 1)
                return
        draw()
        assert canvas.depth == 0
        assert canvas.color == (0.0, 0.0, 0.0, 1.0)

    def test_pop_without_push(self):
        with pytest.raises(IndexError):
            Canvas(10, 10).pop()


class TestText:

    def test_default_typeface_loads(self):
        assert load_typeface() is not None

    def test_bad_typeface_raises(self, tmp_path):
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"not a font")
        with pytest.raises(TypefaceError):
            load_typeface(bogus)

    def test_missing_typeface_raises(self, tmp_path):
        with pytest.raises(TypefaceError):
            load_typeface(tmp_path / "missing.ttf")

    def test_anchored_text_centered(self):
        canvas = Canvas(300, 100)
        canvas.set_font_face(load_typeface(size=16))
        canvas.set_rgb(1, 1, 1)
        canvas.draw_string_anchored("Centered", 150, 50, 0.5, 0.5)
        bbox = canvas.image.getchannel("A").getbbox()
        assert bbox is not None
        left, top, right, bottom = bbox
        assert abs((left + right) / 2 - 150) <= 3
        assert abs((top + bottom) / 2 - 50) <= 6

    def test_text_keeps_path(self):
        canvas = Canvas(300, 100)
        canvas.set_rgb(1, 1, 1)
        canvas.draw_rectangle(0, 0, 10, 10)
        canvas.draw_string_anchored("x", 150, 50, 0.5, 0.5)
        canvas.fill()
        assert _alpha(canvas)[5, 5] == 255


class TestSave:

    def test_save_png(self, tmp_output):
        canvas = Canvas(90, 60)
        canvas.save_png(tmp_output)
        with Image.open(tmp_output) as img:
            assert img.format == "PNG"
            assert img.size == (90, 60)

    def test_save_to_missing_dir_raises(self, tmp_path):
        with pytest.raises(OSError):
            Canvas(10, 10).save_png(tmp_path / "nope" / "out.png")
