"""Text patterns of stars and digits, returned as newline-joined rows."""

from __future__ import annotations


def _join(rows) -> str:
    return "\n".join(rows)


def box_pattern(n: int) -> str:
    """Concentric square of digits counting down from ``n`` to 1 in the centre."""
    size = 2 * n - 1
    last = 2 * n - 2
    return _join(
        "".join(str(n - min(i, j, last - j, last - i)) for j in range(size))
        for i in range(size)
    )


def _closing_half(n: int, start: int) -> list[str]:
    """Rows whose star blocks shrink as the gap between them widens."""
    return [
        "*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(start, n)
    ]


def _opening_half(n: int) -> list[str]:
    """Rows whose star blocks grow as the gap between them narrows."""
    return [
        "*" * (i + 1) + " " * (2 * (n - i - 1)) + "*" * (i + 1) for i in range(n)
    ]


def hollow_rectangle(n: int) -> str:
    """Two mirrored triangles meeting at a full middle row."""
    return _join(_opening_half(n) + _closing_half(n, 1))


def left_angled_triangle(n: int) -> str:
    """Rows of stars shrinking from ``n`` to one."""
    return _join("*" * i for i in range(n, 0, -1))


def left_angled_triangle_numbers(n: int) -> str:
    """Rows counting from 1, shrinking from ``n`` digits to one."""
    return _join("".join(str(j) for j in range(1, i + 1)) for i in range(n, 0, -1))


def number_invert_pyramid(n: int) -> str:
    """Counting up on the left and down on the right, meeting on the last row."""
    return _join(
        "".join(str(j) for j in range(1, i + 1))
        + " " * (2 * (n - i))
        + "".join(str(j) for j in range(i, 0, -1))
        for i in range(1, n + 1)
    )


def right_triangle_stars(n: int) -> str:
    """Rows of space-separated stars, growing by one."""
    return _join("* " * (i + 1) for i in range(n))


def right_triangle_counting(n: int) -> str:
    """Rows counting from 1, growing by one."""
    return _join("".join(f"{j + 1} " for j in range(i + 1)) for i in range(n))


def right_triangle_descending(n: int) -> str:
    """Rows counting down from ``n``, growing by one."""
    return _join("".join(f"{n - j} " for j in range(i + 1)) for i in range(n))


def right_triangle_repeated(n: int) -> str:
    """Row ``i`` repeats the number ``i`` ``i`` times."""
    return _join(f"{i + 1} " * (i + 1) for i in range(n))


def space_diamond(n: int) -> str:
    """A block of stars with a diamond-shaped hole."""
    return _join(_closing_half(n, 0) + _opening_half(n))


def space_diamond_inverted(n: int) -> str:
    """A diamond of stars split down the middle by spaces."""
    return _join(_opening_half(n) + _closing_half(n, 1))


def star_square(n: int) -> str:
    """``n`` rows of ``n`` space-separated stars."""
    return _join("* " * n for _ in range(n))