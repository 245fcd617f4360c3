"""Windowed block scanning over normalized résumé lines.

A block rule describes how to find paired entries in a section:

1. every line containing one of ``section_keywords`` (case-insensitive)
   opens a window over the next ``window`` lines;
2. inside the window, each line accepted by ``is_anchor`` is an anchor
   (the company or institution line);
3. the label (title or degree) is the first line accepted by ``is_label``
   when walking back up to ``lookback`` lines from the anchor; anchors
   without a label are dropped;
4. the detail (duration or year) is the first line accepted by
   ``is_detail`` among the ``lookahead`` lines after the anchor.

Windows from different keyword lines may overlap, in which case the same
anchor is reported more than once. Callers receive every match.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

LinePredicate = Callable[[str], bool]


@dataclass(frozen=True)
class BlockRule:
    """Parameters of one windowed scan."""

    section_keywords: tuple[str, ...]
    window: int
    is_anchor: LinePredicate
    lookback: int
    is_label: LinePredicate
    lookahead: int
    is_detail: LinePredicate


@dataclass(frozen=True)
class BlockMatch:
    """An anchor line paired with its label and optional detail."""

    label: str
    anchor: str
    detail: str | None
    anchor_index: int


def normalize_lines(raw_text: str) -> list[str]:
    """Split text into trimmed, non-empty lines, preserving order."""
    return [line.strip() for line in raw_text.splitlines() if line.strip()]


def is_section_line(line: str, keywords: Sequence[str]) -> bool:
    """Return True if any keyword occurs in the line, ignoring case."""
    lowered = line.lower()
    return any(keyword in lowered for keyword in keywords)


def scan_blocks(lines: Sequence[str], rule: BlockRule) -> Iterator[BlockMatch]:
    """Yield every anchor/label pairing found by ``rule`` in ``lines``."""
    for i, line in enumerate(lines):
        if not is_section_line(line, rule.section_keywords):
            continue
        for j in range(i + 1, min(i + 1 + rule.window, len(lines))):
            anchor = lines[j]
            if not rule.is_anchor(anchor):
                continue
            label = find_backward(lines, j, rule.lookback, rule.is_label)
            if not label:
                continue
            yield BlockMatch(
                label=label,
                anchor=anchor,
                detail=find_forward(lines, j + 1, rule.lookahead, rule.is_detail),
                anchor_index=j,
            )


def find_backward(
    lines: Sequence[str], index: int, span: int, accept: LinePredicate
) -> str | None:
    """Return the nearest line before ``index`` (at most ``span`` back) that ``accept``s."""
    for k in range(index - 1, max(0, index - span) - 1, -1):
        if lines[k] and accept(lines[k]):
            return lines[k]
    return None


def find_forward(
    lines: Sequence[str], start: int, span: int, accept: LinePredicate
) -> str | None:
    """Return the first line in ``lines[start:start + span]`` that ``accept``s."""
    for line in lines[start : start + span]:
        if accept(line):
            return line
    return None
