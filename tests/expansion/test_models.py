"""Tests for expansion modes and results."""

import pytest

from cobolassist.expansion.models import Expanded, ExpansionFailed, ExpansionMode


class TestExpansionModeParse:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("useLocalBuffer", ExpansionMode.USE_LOCAL_BUFFER),
            ("useExternalExpansion", ExpansionMode.USE_EXTERNAL_EXPANSION),
            ("local", ExpansionMode.USE_LOCAL_BUFFER),
            ("LOCAL", ExpansionMode.USE_LOCAL_BUFFER),
            (" expanded ", ExpansionMode.USE_EXTERNAL_EXPANSION),
            (ExpansionMode.USE_LOCAL_BUFFER, ExpansionMode.USE_LOCAL_BUFFER),
        ],
    )
    def test_accepted_values(self, value: str, expected: ExpansionMode) -> None:
        assert ExpansionMode.parse(value) is expected

    def test_unknown_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            ExpansionMode.parse("sometimes")

    def test_wire_value(self) -> None:
        assert ExpansionMode.USE_LOCAL_BUFFER.value == "useLocalBuffer"


class TestResults:
    def test_failed_defaults_to_no_timeout(self) -> None:
        assert ExpansionFailed("boom").timeout_sec is None

    def test_expanded_holds_buffer(self) -> None:
        assert Expanded(("A",)).buffer == ("A",)
