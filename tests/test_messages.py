"""Tests for user-facing failure messages."""

import pytest

from cocktails.messages import FAILURE_MESSAGES, failure_message
from cocktails.models import FailureReason


class TestFailureMessages:
    """Every failure reason has a readable message."""

    @pytest.mark.parametrize("reason", list(FailureReason))
    def test_every_reason_has_a_message(self, reason):
        assert failure_message(reason)

    def test_messages_cover_exactly_the_failure_reasons(self):
        assert set(FAILURE_MESSAGES) == set(FailureReason)

    def test_empty_query_message(self):
        assert failure_message(FailureReason.EMPTY_QUERY) == "Please enter a cocktail name or ingredient to search."
