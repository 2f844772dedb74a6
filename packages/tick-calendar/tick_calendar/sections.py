"""Section lookup: locate an offset inside a sequence of consecutive sections."""
from __future__ import annotations

from typing import Sequence


def find_section(
    offset: int, durations: Sequence[int], max_sections: int | None = None
) -> tuple[int, int]:
    """Return (section index, offset within that section).

    Sections are laid end to end in order. Zero-length sections are never
    selected. The scan stops after ``max_sections`` sections (default: all of
    them); an offset past the end yields the bound as index and the leftover
    offset.
    """
    bound = len(durations) if max_sections is None else min(max_sections, len(durations))
    remaining = offset
    index = 0
    while index < bound:
        length = durations[index]
        if remaining < length:
            break
        remaining -= length
        index += 1
    return index, remaining
