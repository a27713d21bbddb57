"""
Unit tests for page coordinate conversion.
"""

from types import SimpleNamespace

import pytest

from flexpdf.layout import FlexDirection, LayoutNode, absolute_left, absolute_rect, absolute_top, canvas_y


def _chain(*offsets):
    """Build root -> n1 -> n2 ... from (left, top) pairs; returns the nodes."""
    nodes = [SimpleNamespace(computed_left=999.0, computed_top=999.0, parent=None)]
    for left, top in offsets:
        nodes.append(SimpleNamespace(computed_left=left, computed_top=top, parent=nodes[-1]))
    return nodes


class TestAbsolutePosition:
    """Tests for absolute_left() / absolute_top()."""

    def test_absolute_when_chain_then_sums_offsets_excluding_root(self):
        # Arrange
        nodes = _chain((10, 20), (5, 7), (1, 1))

        # Act / Assert
        assert absolute_left(nodes[-1]) == 16
        assert absolute_top(nodes[-1]) == 28

    def test_absolute_when_root_then_origin(self):
        root = _chain()[0]

        assert absolute_left(root) == 0
        assert absolute_top(root) == 0

    def test_absolute_when_solved_tree_then_matches_nested_offsets(self):
        # Arrange: column root, row of height 100 at top 50, child at left 30
        root = LayoutNode()
        spacer = LayoutNode()
        spacer.set_height(50)
        row = LayoutNode()
        row.set_height(100)
        row.set_flex_direction(FlexDirection.ROW)
        gap = LayoutNode()
        gap.set_width(30)
        leaf = LayoutNode()
        leaf.set_width(40)
        row.insert_child(gap)
        row.insert_child(leaf)
        root.insert_child(spacer)
        root.insert_child(row)

        # Act
        root.calculate_layout(500, 700)

        # Assert
        assert absolute_rect(leaf) == (30.0, 50.0, 40.0, 100.0)

    def test_absolute_when_not_solved_then_zero(self):
        root = LayoutNode()
        child = LayoutNode()
        root.insert_child(child)

        assert absolute_left(child) == 0
        assert absolute_top(child) == 0


class TestCanvasY:
    """Tests for the top-down to bottom-up Y conversion."""

    @pytest.mark.parametrize(
        "page_height, top, height, expected",
        [
            (700, 100, 50, 550),
            (700, 0, 700, 0),
            (700, 0, 0, 700),
            (841.89, 41.89, 100, 700),
        ],
    )
    def test_canvas_y_when_box_then_bottom_edge(self, page_height, top, height, expected):
        assert canvas_y(page_height, top, height) == pytest.approx(expected)
