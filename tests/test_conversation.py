"""Tests for csvinsight.services.conversation — chat transcript threading."""

from __future__ import annotations

import pytest

from csvinsight.services.conversation import (
    START_OF_CONVERSATION,
    extend_context,
    resolve_context,
)


class TestResolveContext:
    @pytest.mark.parametrize("context", [None, "", "   \n"])
    def test_empty_uses_sentinel(self, context):
        assert resolve_context(context) == START_OF_CONVERSATION

    def test_existing_context_kept_verbatim(self):
        context = "  earlier turns  "
        assert resolve_context(context) == context


class TestExtendContext:
    def test_appends_exchange(self):
        result = extend_context("prior", "Summarize", "It has 3 rows.")
        assert result == "prior\n\nUser: Summarize\n\nAssistant: It has 3 rows."

    def test_turns_accumulate(self):
        first = extend_context(START_OF_CONVERSATION, "Q1", "A1")
        second = extend_context(first, "Q2", "A2")
        assert second.startswith(first)
        assert second.endswith("User: Q2\n\nAssistant: A2")

    def test_no_cap_applied(self):
        context = "x" * 100_000
        result = extend_context(context, "m", "r")
        assert len(result) == len(context) + len("\n\nUser: m\n\nAssistant: r")
