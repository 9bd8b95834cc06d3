"""Visual reordering of right-to-left text for terminals without bidi support.

Many consoles print characters strictly left to right, which turns Hebrew or
Arabic file names into mirror images. The shaper reverses every run of RTL
characters so the name reads correctly on such a console. It is only meant for
interactive output; files and pipes receive names in logical order.
"""

from typing import List

_RTL_RANGES = (
    (0x0590, 0x08FF),  # Hebrew, Arabic, Syriac, Thaana, NKo, Samaritan, ...
    (0xFB50, 0xFDFF),  # Arabic presentation forms A
    (0xFE70, 0xFEFF),  # Arabic presentation forms B
)


def is_rtl_char(char: str) -> bool:
    """Check whether a single character belongs to an RTL script block.

    Example:
        >>> is_rtl_char("א"), is_rtl_char("a")
        (True, False)
    """
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in _RTL_RANGES)


def contains_rtl(text: str) -> bool:
    return any(is_rtl_char(char) for char in text)


def _flush(run: List[str], has_rtl: bool, result: List[str]) -> None:
    if not has_rtl:
        result.extend(run)
        return
    trailing = 0
    while trailing < len(run) and run[len(run) - 1 - trailing] == " ":
        trailing += 1
    body = run[: len(run) - trailing]
    result.extend(reversed(body))
    result.extend(" " * trailing)


def shape_for_console(text: str) -> str:
    """Reorder RTL runs of a name for left-to-right display.

    Characters are scanned left to right. RTL characters and spaces accumulate in
    a run; any other character ends the run. A run holding at least one RTL
    character is reversed, except for its trailing spaces which stay at the end.
    Runs without RTL characters are kept as they are.

    Args:
        text: Name in logical order.

    Returns:
        The name in visual order. Names without RTL characters are unchanged.

    Example:
        >>> shape_for_console("report.txt")
        'report.txt'
        >>> shape_for_console("שלום.txt")
        'םולש.txt'
        >>> shape_for_console("אב גד x")
        'דג בא x'
    """
    if not contains_rtl(text):
        return text

    result: List[str] = []
    run: List[str] = []
    run_has_rtl = False

    for char in text:
        if is_rtl_char(char):
            run.append(char)
            run_has_rtl = True
        elif char == " ":
            run.append(char)
        else:
            _flush(run, run_has_rtl, result)
            run = []
            run_has_rtl = False
            result.append(char)

    _flush(run, run_has_rtl, result)
    return "".join(result)
