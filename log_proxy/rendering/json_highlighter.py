"""
Line-local syntax coloring for pretty-printed JSON.

The highlighter works on one line of ``json.dumps(..., indent=2)`` output at a
time using a single regex pass, so text that has already been wrapped in color
codes is never matched again and stripping the codes gives back the input line.

Quote matching is not escape-aware: a string value holding escaped quotes
followed by a colon (``"x\\": 1"``) has its first part colored as a key.
Only ``colorize_json_line`` knows about lines, so a highlighter that colors
while serializing can replace it without touching callers.
"""

import re

from log_proxy.rendering.palette import Palette

_TOKEN_RE = re.compile(
    r'(?P<key>"[^"]*")(?=\s*:)'
    r'|(?P<string>"[^"]*")'
    r"|(?P<colon>:\s*)(?:"
    r"(?P<number>-?\d+(?:\.\d*)?)"
    r"|(?P<boolean>true|false)"
    r"|(?P<null>null))"
    r"|(?P<punctuation>[{}\[\],])"
)


def colorize_json_line(line: str, palette: Palette) -> str:
    """Return ``line`` with keys, values and structural characters colorized."""

    def _paint(match: "re.Match[str]") -> str:
        if match.group("key") is not None:
            return palette.paint(palette.key, match.group("key"))
        if match.group("string") is not None:
            return palette.paint(palette.string, match.group("string"))
        if match.group("punctuation") is not None:
            return palette.paint(palette.punctuation, match.group("punctuation"))

        colon = match.group("colon")
        for kind in ("number", "boolean", "null"):
            value = match.group(kind)
            if value is not None:
                return colon + palette.paint(getattr(palette, kind), value)
        return match.group(0)

    return _TOKEN_RE.sub(_paint, line)
