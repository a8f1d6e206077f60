"""
Line tokenizer for AEC results downloads.

A quote character toggles an inside-quote flag and is never copied.
Commas outside quotes end a field; inside quotes they are kept.  Each
field is trimmed of surrounding whitespace.

Quirk kept on purpose: the last field is only emitted when its raw
(untrimmed) buffer is non-empty, so ``"A,B,"`` yields ``["A", "B"]``
rather than ``["A", "B", ""]``.  Header and data rows go through the
same function, so column positions stay consistent either way.
"""

from __future__ import annotations

QUOTE = '"'
SEPARATOR = ","


def tokenize_line(line: str) -> list[str]:
    """Split *line* into trimmed fields.  Never raises."""
    fields: list[str] = []
    buffer: list[str] = []
    quoted = False

    for char in line:
        if char == QUOTE:
            quoted = not quoted
        elif char == SEPARATOR and not quoted:
            fields.append("".join(buffer).strip())
            buffer = []
        else:
            buffer.append(char)

    if buffer:
        fields.append("".join(buffer).strip())
    return fields
