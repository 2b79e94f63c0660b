"""String escaping for JSON string literals."""

from __future__ import annotations

import re
from typing import Final

from ._profile import ProfileContext

# Control characters, the two JSON metacharacters, and the HTML angle
# brackets that could close an enclosing <script> or comment.
_ESCAPE_PATTERN: Final = re.compile(r'["\\<>\x00-\x1f]')

_CONTROL_LIMIT: Final = 0x20

_SHORT_ESCAPES: Final = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _build_escape_table() -> dict[str, str]:
    table = {chr(code): f"\\u{code:04x}" for code in range(_CONTROL_LIMIT)}
    table["<"] = f"\\u{ord('<'):04x}"
    table[">"] = f"\\u{ord('>'):04x}"
    table.update(_SHORT_ESCAPES)
    return table


ESCAPE_TABLE: Final = _build_escape_table()


def _replace(match: re.Match[str]) -> str:
    return ESCAPE_TABLE[match.group(0)]


def escape_string(s: str) -> str:
    """
    Returns the quoted JSON literal for ``s``.

    Runs of characters that need no escaping are copied as-is; everything
    outside ASCII passes through unchanged. Angle brackets are always
    emitted as unicode escapes so untrusted text cannot terminate a
    surrounding ``</script>`` block or ``-->`` comment.
    """
    with ProfileContext("escape_string", len(s)):
        return '"' + _ESCAPE_PATTERN.sub(_replace, s) + '"'
