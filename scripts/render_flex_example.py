"""
Render a small flex layout to a PDF for manual review.

A red 100pt row holds a fixed green sidebar and a blue body that shrinks
to fit, followed by a centred title and a wrapped paragraph.
"""

import asyncio
import logging
import sys
from pathlib import Path

from flexpdf import Fonts, div, font, page, pdf, text

OUTPUT_PATH = Path(__file__).parent.parent / "workspace" / "a4.pdf"

BODY = (
    "Boxes are laid out with a flexbox solver, then painted top to bottom. "
    "Text wraps at the width its box receives."
)


def build_document():
    title_font = font(Fonts.HELVETICA_BOLD)

    return (
        pdf()
        .author("flexpdf")
        .font(title_font)
        .child(
            page()
            .child(
                div()
                .flex()
                .h(100)
                .bg(0xFF0000)
                .child(div().w(100).shrink0().bg(0x00FF00))
                .child(div().w_full().bg(0x0000FF))
            )
            .child(text("Flex layout").font(title_font).size(24).text_center().w_full())
            .child(
                div()
                .flex_col()
                .items_center()
                .child(text(BODY).size(12).leading(1.5).w(300))
            )
        )
    )


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    output = Path(sys.argv[1]) if len(sys.argv) > 1 else OUTPUT_PATH
    written = asyncio.run(build_document().save(output))
    print(f"[OK] Wrote {written}")


if __name__ == "__main__":
    main()
