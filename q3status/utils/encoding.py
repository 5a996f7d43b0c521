"""
Text utilities for Quake III status strings

Player names and server metadata carry in-band color codes: a caret
followed by a code character (``^1``, ``^7``...). ``^^`` stands for a
literal caret.
"""

COLOR_ESCAPE = '^'

# Quake III color table is indexed by these characters
COLOR_DIGITS = '0123456789'


def sanitize_string(text: str) -> str:
    """
    Remove color codes from a string.

    Works on code points, so non-ASCII names survive untouched.

    Rules:
    - ``^`` followed by any character is a color code and is dropped.
    - ``^^`` emits one literal ``^``. The second caret of the pair still
      opens a color code when a digit follows it (``^^7`` -> ``^``),
      otherwise it belongs to the pair and is dropped alone.
    - A caret at the very end of the string is dropped.

    Args:
        text: Raw string with color codes

    Returns:
        String without color codes, never longer than the input

    Example:
        >>> sanitize_string('^1Player^7Name')
        'PlayerName'
        >>> sanitize_string('^1Player^^7Name')
        'Player^Name'
        >>> sanitize_string('^1Player^^^7Name')
        'Player^^Name'
        >>> sanitize_string('^2Bob^^Cool')
        'Bob^Cool'
    """
    cleaned = []
    length = len(text)
    pair_tail = False

    i = 0
    while i < length:
        c = text[i]
        if c != COLOR_ESCAPE:
            cleaned.append(c)
            pair_tail = False
            i += 1
            continue

        following = text[i + 1] if i + 1 < length else ''

        if following == COLOR_ESCAPE:
            # Escaped caret; the next caret is looked at again
            cleaned.append(COLOR_ESCAPE)
            pair_tail = True
            i += 1
        elif pair_tail and following not in COLOR_DIGITS:
            pair_tail = False
            i += 1
        else:
            pair_tail = False
            i += 2

    return ''.join(cleaned)

