"""Chat transcript threading.

The server keeps no chat state: the client sends the transcript it received
from the previous turn and gets the extended transcript back.
"""

from __future__ import annotations

START_OF_CONVERSATION = "This is the start of the conversation."


def resolve_context(context: str | None) -> str:
    """Return *context*, or the start-of-conversation sentinel when empty."""
    if context is None or not context.strip():
        return START_OF_CONVERSATION
    return context


def extend_context(context: str, message: str, reply: str) -> str:
    """Append one user/assistant exchange to *context*.

    The transcript grows without bound.
    """
    return context + "\n\nUser: " + message + "\n\nAssistant: " + reply
