"""
Unit tests for the Text element: font resolution, measurement and drawing.
"""

from unittest.mock import call

import pytest

from flexpdf.elements import Div, Page, Text
from flexpdf.errors import InvalidGeometryError, MissingFontError
from flexpdf.fonts import Fonts, font


class TestTextFont:
    """Tests for font selection at node construction."""

    def test_layout_node_when_no_font_and_no_default_then_raises(self, mock_canvas):
        mock_canvas.default_font = None

        with pytest.raises(MissingFontError):
            Text("orphan").layout_node(mock_canvas, {})

    def test_layout_node_when_font_not_registered_then_raises(self, mock_canvas):
        ref = font(Fonts.TIMES_ROMAN)

        with pytest.raises(MissingFontError, match="not registered"):
            Text("hello").font(ref).layout_node(mock_canvas, {})

    def test_paint_when_explicit_font_then_drawn_with_it(self, mock_canvas, fake_font):
        # Arrange
        ref = font(Fonts.TIMES_ROMAN)
        mock_canvas.default_font = None
        element = Text("hello").font(ref).size(10)

        # Act
        Page().child(element).render(mock_canvas, {ref: fake_font})

        # Assert
        drawn_font = mock_canvas.draw_text_line.call_args[0][1]
        assert drawn_font is fake_font

    @pytest.mark.parametrize("size", [0, -3])
    def test_layout_node_when_size_not_positive_then_raises(self, mock_canvas, size):
        with pytest.raises(InvalidGeometryError):
            Text("x").size(size).layout_node(mock_canvas, {})


class TestTextMeasure:
    """Tests for the measurement callback installed on the node."""

    def test_layout_when_explicit_width_then_height_from_wrapping(self, mock_canvas):
        element = Text("hello world").size(10).w(40)

        Page().child(element).render(mock_canvas, {})

        node = element.layout_node(mock_canvas, {})
        assert node.computed_width == 40.0
        assert node.computed_height == pytest.approx(22.0)

    def test_layout_when_in_row_without_width_then_intrinsic_width(self, mock_canvas):
        element = Text("hello world").size(10)
        row = Div().items_start().child(element)

        Page().child(row).render(mock_canvas, {})

        node = element.layout_node(mock_canvas, {})
        assert node.computed_width == 66.0
        assert node.computed_height == 10.0

    def test_layout_when_leading_none_then_lines_packed(self, mock_canvas):
        element = Text("a\nb").size(10).leading_none().w(100)

        Page().child(element).render(mock_canvas, {})

        assert element.layout_node(mock_canvas, {}).computed_height == 20.0


class TestTextPaint:
    """Tests for line drawing."""

    def test_paint_when_wrapped_then_one_draw_per_line(self, mock_canvas, fake_font):
        # Box: 40 x 22 at the page top. Block centre at 700 - 11 = 689,
        # first baseline 689 + 11 - 7.5.
        element = Text("hello world").size(10).w(40)

        Page().child(element).render(mock_canvas, {})

        assert mock_canvas.draw_text_line.call_args_list == [
            call("hello", fake_font, 10, 0.0, pytest.approx(692.5)),
            call("world", fake_font, 10, 0.0, pytest.approx(680.5)),
        ]

    def test_paint_when_centered_full_width_then_line_centered(self, mock_canvas):
        element = Text("hi").size(10).text_center().w_full()

        Page().child(element).render(mock_canvas, {})

        x = mock_canvas.draw_text_line.call_args[0][3]
        assert x == pytest.approx((500 - 12) / 2)

    def test_paint_when_right_aligned_then_line_ends_at_box_edge(self, mock_canvas):
        element = Text("hi").size(10).text_right().w(100)

        Page().child(element).render(mock_canvas, {})

        x = mock_canvas.draw_text_line.call_args[0][3]
        assert x == pytest.approx(88.0)

    def test_setter_when_after_layout_then_ignored(self, mock_canvas):
        element = Text("hi").size(10)
        element.layout_node(mock_canvas, {})

        element.size(40)

        assert element.style.font_size == 10

    def test_value_when_assigned_after_layout_then_rejected(self, mock_canvas):
        # Arrange
        element = Text("hi").size(10)
        Page().child(element).render(mock_canvas, {})
        mock_canvas.draw_text_line.reset_mock()

        # Act
        with pytest.raises(AttributeError):
            element.value = "a much longer replacement string that no longer fits"
        element.paint(mock_canvas, {})

        # Assert
        assert element.value == "hi"
        assert [c[0][0] for c in mock_canvas.draw_text_line.call_args_list] == ["hi"]
