import pytest
import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add src to sys.path so we can import flexpdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from flexpdf.output.canvas import PageCanvas  # noqa: E402


class FakeFont:
    """Monospaced metrics: every character is 0.6 em wide, height is 1 em."""

    name = "Helvetica"

    def width_of_text_at_size(self, text: str, size: float) -> float:
        return len(text) * size * 0.6

    def height_at_size(self, size: float) -> float:
        return size


# Common test fixtures
@pytest.fixture
def fake_font():
    return FakeFont()


@pytest.fixture
def mock_canvas(fake_font):
    """PageCanvas double that records drawing calls and tracks page size."""
    canvas = MagicMock(spec=PageCanvas)
    canvas.page_width = 500.0
    canvas.page_height = 700.0
    canvas.default_font = fake_font

    def _set_page_size(width, height):
        canvas.page_width = width
        canvas.page_height = height

    canvas.set_page_size.side_effect = _set_page_size
    return canvas
