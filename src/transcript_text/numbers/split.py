"""Split a string on any of a set of delimiter characters."""

from __future__ import annotations

from typing import List


def _find_first_of(full: str, delimiters: str, start: int) -> int:
    """Index of the first delimiter at or after start, or -1."""
    for i in range(start, len(full)):
        if full[i] in delimiters:
            return i
    return -1


def split_string_to_vector(
    full: str,
    delimiters: str,
    omit_empty_strings: bool = False,
) -> List[str]:
    """Split `full` on every character of `delimiters`, left to right.

    Args:
        full: String to split.
        delimiters: Delimiter characters; any one of them ends a field.
        omit_empty_strings: Drop empty fields (from leading, trailing or
            adjacent delimiters).

    Returns:
        Fields in order. With omit_empty_strings=False the result always
        has one more entry than there are delimiter hits, and joining the
        fields with a single delimiter gives back `full`. Empty input gives
        [""], or [] when omitting empty strings.
    """
    out: List[str] = []
    start = 0
    end = len(full)
    while True:
        found = _find_first_of(full, delimiters, start)
        stop = end if found == -1 else found
        # start != end covers a delimiter at the very end
        if not omit_empty_strings or (stop != start and start != end):
            out.append(full[start:stop])
        if found == -1:
            return out
        start = found + 1
