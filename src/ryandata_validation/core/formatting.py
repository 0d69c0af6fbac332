"""Text helpers shared by validator descriptions."""

from __future__ import annotations

from collections.abc import Sequence


def natural_list(items: Sequence[object], conjunction: str = "or") -> str:
    """Render items as a natural-language list.

    Examples:
        >>> natural_list(["A"])
        'A'
        >>> natural_list(["A", "B"])
        'A or B'
        >>> natural_list(["A", "B", "C"])
        'A, B, or C'
    """
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {conjunction} {words[1]}"
    return f"{', '.join(words[:-1])}, {conjunction} {words[-1]}"


def join_descriptions(descriptions: Sequence[str | None], separator: str) -> str | None:
    """Join the present descriptions, or return None if there are none."""
    present = [d for d in descriptions if d is not None]
    if not present:
        return None
    return separator.join(present)
