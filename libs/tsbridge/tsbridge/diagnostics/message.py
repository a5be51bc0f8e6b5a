"""Flattening of nested checker messages into plain text."""

from __future__ import annotations

from tsbridge.checker.units import DiagnosticMessageChain


def flatten_message_text(
    message: str | DiagnosticMessageChain | None,
    new_line: str = "\n",
    indent: int = 0,
) -> str:
    """Render *message* as a single string.

    Each elaboration in a chain goes on its own line, indented by two spaces
    per nesting level below the head message.
    """
    if message is None:
        return ""
    if isinstance(message, str):
        return message

    result = ""
    if indent:
        result += new_line + "  " * indent
    result += message.message_text
    for child in message.next:
        result += flatten_message_text(child, new_line, indent + 1)
    return result
