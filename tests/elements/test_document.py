"""
Integration tests for document assembly.

Renders real PDFs with reportlab and inspects them with pypdf.
"""

import io

import pytest
from pypdf import PdfReader
from reportlab.lib.pagesizes import A4, letter

from flexpdf import (
    FontEmbeddingError,
    Fonts,
    MissingFontError,
    RenderConfig,
    div,
    font,
    page,
    pdf,
    text,
)
from flexpdf.output import javascript_names

TOLERANCE_PT = 0.01


def _read(data: bytes) -> PdfReader:
    return PdfReader(io.BytesIO(data))


def _page_size(reader: PdfReader, index: int):
    box = reader.pages[index].mediabox
    return float(box.width), float(box.height)


class TestRenderToBytes:
    """Tests for PDF.render_to_bytes()."""

    @pytest.mark.asyncio
    async def test_render_when_single_page_then_valid_pdf_with_page_size(self):
        # Arrange
        doc = pdf().child(page().size((300, 400)).child(div().w_full().h(100).bg(0xFF0000)))

        # Act
        data = await doc.render_to_bytes()

        # Assert
        assert data.startswith(b"%PDF")
        reader = _read(data)
        assert len(reader.pages) == 1
        assert _page_size(reader, 0) == pytest.approx((300, 400), abs=TOLERANCE_PT)

    @pytest.mark.asyncio
    async def test_render_when_pages_mix_sizes_then_unsized_pages_get_default(self):
        doc = pdf().child(page()).child(page().size(letter)).child(page())

        reader = _read(await doc.render_to_bytes())

        assert len(reader.pages) == 3
        assert _page_size(reader, 0) == pytest.approx(A4, abs=TOLERANCE_PT)
        assert _page_size(reader, 1) == pytest.approx(letter, abs=TOLERANCE_PT)
        assert _page_size(reader, 2) == pytest.approx(A4, abs=TOLERANCE_PT)

    @pytest.mark.asyncio
    async def test_render_when_config_page_size_then_used_as_default(self):
        doc = pdf(RenderConfig(page_size=letter)).child(page())

        reader = _read(await doc.render_to_bytes())

        assert _page_size(reader, 0) == pytest.approx(letter, abs=TOLERANCE_PT)

    @pytest.mark.asyncio
    async def test_render_when_metadata_set_then_written(self):
        doc = pdf().author("Docs Team").title("Quarterly").child(page())

        reader = _read(await doc.render_to_bytes())

        assert reader.metadata.author == "Docs Team"
        assert reader.metadata.title == "Quarterly"

    @pytest.mark.asyncio
    async def test_render_when_text_then_extractable(self):
        # Arrange
        times = font(Fonts.TIMES_ROMAN)
        doc = (
            pdf()
            .font(times)
            .child(
                page().child(
                    div()
                    .flex_col()
                    .child(text("Hello flex").font(times).size(24))
                    .child(text("Default font body"))
                )
            )
        )

        # Act
        reader = _read(await doc.render_to_bytes())

        # Assert
        content = reader.pages[0].extract_text()
        assert "Hello flex" in content
        assert "Default font body" in content


class TestScripts:
    """Tests for document-level JavaScript."""

    @pytest.mark.asyncio
    async def test_render_when_scripts_then_name_tree_sorted(self):
        doc = (
            pdf()
            .script("zeta", "this.print();")
            .script("alpha", "console.println('init');")
            .script("init", "var ready = true;")
            .child(page())
        )

        reader = _read(await doc.render_to_bytes())

        assert javascript_names(reader) == ["alpha", "init", "zeta"]

    @pytest.mark.asyncio
    async def test_render_when_no_scripts_then_no_javascript(self):
        reader = _read(await pdf().child(page()).render_to_bytes())

        assert javascript_names(reader) == []


class TestFailures:
    """Tests for aborted documents."""

    @pytest.mark.asyncio
    async def test_render_when_font_missing_on_disk_then_embedding_error(self, tmp_path):
        doc = pdf().font(font(tmp_path / "missing.ttf")).child(page())

        with pytest.raises(FontEmbeddingError):
            await doc.render_to_bytes()

    @pytest.mark.asyncio
    async def test_render_when_font_bytes_invalid_then_embedding_error(self):
        doc = pdf().font(font(b"not a font")).child(page())

        with pytest.raises(FontEmbeddingError):
            await doc.render_to_bytes()

    @pytest.mark.asyncio
    async def test_render_when_text_font_not_registered_then_missing_font(self):
        doc = pdf().child(page().child(text("x").font(font(Fonts.COURIER))))

        with pytest.raises(MissingFontError):
            await doc.render_to_bytes()

    @pytest.mark.asyncio
    async def test_render_when_default_font_disabled_then_missing_font(self):
        doc = pdf(RenderConfig(default_font=None)).child(page().child(text("x")))

        with pytest.raises(MissingFontError):
            await doc.render_to_bytes()


class TestSave:

    @pytest.mark.asyncio
    async def test_save_when_parent_missing_then_created(self, tmp_path):
        target = tmp_path / "out" / "nested" / "doc.pdf"

        written = await pdf().child(page()).save(target)

        assert written == target
        assert target.read_bytes().startswith(b"%PDF")
