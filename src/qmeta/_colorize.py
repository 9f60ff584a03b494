"""Text colorization and styling for terminal output.

Provides lightweight formatting using \\-X- escape-like codes in strings.
Codes are turned into ANSI sequences right before printing.

Syntax:
    \\-r-  red        \\-g-  green      \\-b-  blue       \\-y-  yellow
    \\-c-  cyan       \\-s-  strong (bold/bright)         \\-d-  dim
    \\-n-  normal (reset all)

Public API
----------
apply_ansi(text)         → str with ANSI codes applied
should_use_color(stream) → bool (TTY detection + NO_COLOR)
highlight_doc(text)      → str with description columns marked up
"""

import os
import re


# ANSI escape codes for colors and styles
CODES = {
    "r": "\033[31m",  # red
    "g": "\033[32m",  # green
    "b": "\033[34m",  # blue
    "y": "\033[33m",  # yellow
    "c": "\033[36m",  # cyan
    "s": "\033[1m",   # strong (bold/bright)
    "d": "\033[2m",   # dim
    "n": "\033[0m",   # normal (reset)
}


# Pattern to match color codes like \-r-, \-cs-, etc.
COLOR_CODE_PATTERN = re.compile(r"\\-([rgbycsdn]+)-")


def apply_ansi(text):
    """Replace color codes with ANSI escape sequences.

    Automatically appends a reset code at the end if any color codes were applied.

    Args:
        text: (str) Text potentially containing \\-X- color codes

    Returns:
        (str) Text with color codes replaced by ANSI sequences, with trailing reset
    """
    result, count = COLOR_CODE_PATTERN.subn(
        lambda match: "".join(CODES[c] for c in match.group(1)), text
    )
    if count:
        result += CODES["n"]
    return result


def should_use_color(stream):
    """Determine if color output should be used.

    Checks:
    - Stream is a TTY
    - NO_COLOR environment variable is not set

    Args:
        stream: Output stream (like sys.stdout)

    Returns:
        (bool) True if colors should be applied
    """
    # Standard: https://no-color.org/
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except AttributeError:
        return False


def highlight_doc(text):
    """Mark up a value description with color codes.

    The header line is strong, member names are cyan and their types dim.

    Args:
        text: (str) Output of `describe`
    Returns:
        (str) Text with \\-X- color codes
    """
    lines = text.split("\n")
    marked = [f"\\-s-{lines[0]}\\-n-" if lines[0] else ""]
    for line in lines[1:]:
        name, sep, rest = line.partition("\t")
        marked.append(f"\\-c-{name}\\-n-{sep}\\-d-{rest}\\-n-")
    return "\n".join(marked)
