"""
Module: text.wrap

Purpose:
    Greedy word wrapping against a caller-supplied width function, so the
    same primitive serves real fonts and test metrics alike.

Key Functions:
    - break_text_into_lines(): Split text into lines no wider than a limit
"""

from __future__ import annotations

from typing import Callable, List

# Slack for re-wrapping at a width that was itself measured from a line.
WIDTH_TOLERANCE = 1e-6


def break_text_into_lines(
    text: str,
    max_width: float,
    width_of: Callable[[str], float],
) -> List[str]:
    """
    Wrap text into lines.

    Explicit newlines always break. Within a paragraph, words (split on
    whitespace) are packed while the line, including the joining space,
    stays within max_width. A word wider than max_width gets its own line
    rather than being split.

    Args:
        text: Text to wrap (outer whitespace is ignored)
        max_width: Width limit in points, may be math.inf
        width_of: Measures a string in points

    Returns:
        Lines in order; never empty (empty text gives [""])

    Example:
        >>> break_text_into_lines("aa bb cc", 5, len)
        ['aa bb', 'cc']
    """
    lines: List[str] = []
    space = width_of(" ")

    for paragraph in text.strip().split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        current = [words[0]]
        current_width = width_of(words[0])
        for word in words[1:]:
            word_width = width_of(word)
            if current_width + space + word_width <= max_width + WIDTH_TOLERANCE:
                current.append(word)
                current_width += space + word_width
            else:
                lines.append(" ".join(current))
                current = [word]
                current_width = word_width
        lines.append(" ".join(current))

    return lines
