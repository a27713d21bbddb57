"""
Unit tests for the PageCanvas paint surface.
"""

import io
from unittest.mock import MagicMock, call

import pytest
from pypdf import PdfReader
from reportlab.pdfgen import canvas

from flexpdf.colors import hex_to_rgb
from flexpdf.fonts import ResolvedFont
from flexpdf.output.canvas import PageCanvas


@pytest.fixture
def rl_canvas():
    """Mock reportlab canvas."""
    return MagicMock(spec=canvas.Canvas)


class TestFillRectangle:

    def test_fill_when_no_color_then_nothing_drawn(self, rl_canvas):
        PageCanvas(rl_canvas).fill_rectangle(0, 0, 10, 10, None)

        assert rl_canvas.method_calls == []

    def test_fill_when_color_then_filled_without_stroke_in_saved_state(self, rl_canvas):
        red = hex_to_rgb(0xFF0000)

        PageCanvas(rl_canvas).fill_rectangle(5, 6, 7, 8, red)

        assert rl_canvas.method_calls == [
            call.saveState(),
            call.setFillColor(red),
            call.rect(5, 6, 7, 8, stroke=0, fill=1),
            call.restoreState(),
        ]


class TestDrawTextLine:

    def test_draw_when_text_then_font_set_and_string_drawn(self, rl_canvas):
        PageCanvas(rl_canvas).draw_text_line("hello", ResolvedFont("Courier"), 12, 10, 20)

        rl_canvas.setFont.assert_called_once_with("Courier", 12)
        rl_canvas.drawString.assert_called_once_with(10, 20, "hello")

    def test_draw_when_empty_then_skipped(self, rl_canvas):
        PageCanvas(rl_canvas).draw_text_line("", ResolvedFont("Courier"), 12, 10, 20)

        rl_canvas.drawString.assert_not_called()


class TestPageState:

    def test_set_page_size_when_called_then_canvas_and_properties_updated(self, rl_canvas):
        page = PageCanvas(rl_canvas, page_size=(100, 200))

        page.set_page_size(300, 400)

        rl_canvas.setPageSize.assert_called_once_with((300, 400))
        assert (page.page_width, page.page_height) == (300, 400)

    def test_clip_rect_when_exited_then_state_restored(self, rl_canvas):
        page = PageCanvas(rl_canvas)

        with page.clip_rect(1, 2, 3, 4):
            rl_canvas.restoreState.assert_not_called()

        path = rl_canvas.beginPath.return_value
        path.rect.assert_called_once_with(1, 2, 3, 4)
        rl_canvas.clipPath.assert_called_once_with(path, stroke=0, fill=0)
        rl_canvas.restoreState.assert_called_once()

    def test_show_page_when_drawing_real_canvas_then_pages_written(self):
        # Arrange
        buffer = io.BytesIO()
        real = canvas.Canvas(buffer)
        page = PageCanvas(real, default_font=ResolvedFont("Helvetica"))

        # Act
        page.set_page_size(200, 100)
        page.fill_rectangle(0, 0, 200, 100, hex_to_rgb(0x336699))
        page.draw_text_line("first", page.default_font, 12, 10, 50)
        page.show_page()
        page.draw_text_line("second", page.default_font, 12, 10, 50)
        page.show_page()
        real.save()

        # Assert
        reader = PdfReader(io.BytesIO(buffer.getvalue()))
        assert len(reader.pages) == 2
        assert "first" in reader.pages[0].extract_text()
