"""Hex color validation shared by the conversions and the editor state."""

import re

# The leading '#' is optional: "#abc", "abc", "#aabbcc" and "aabbcc" all pass.
HEX_PATTERN = re.compile(r"^#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def is_valid_hex(hex_str: str) -> bool:
    """
    Check whether a string is a 3- or 6-digit hex color.

    Args:
        hex_str: Candidate such as ``"#fff"`` or ``"00ff00"``
    Returns:
        True if ``hex_str`` fully matches HEX_PATTERN
    """
    return HEX_PATTERN.fullmatch(hex_str) is not None
