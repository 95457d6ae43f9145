"""Tests for documentation comment parsing."""

from __future__ import annotations

import pytest

from cobolassist.docs.models import DocElement, DocumentationRecord
from cobolassist.docs.parser import (
    DocState,
    StructuredDocParser,
    is_structured,
    parse_documentation,
)

STRUCTURED_BLOCK = (
    "      *>/**",
    "      *> Computes the invoice total.",
    "      *> Rounds half up.",
    "      *>",
    "      *> @param WS-INVOICE invoice being totalled",
    "      *> @param WS-RATE",
    "      *> @return WS-TOTAL the total",
    "      *> @throws INVALID-INVOICE when the invoice has no items",
    "      *>*/",
)


class TestDialectSelection:
    def test_opener_anywhere_selects_structured(self) -> None:
        block = ("      *>-> freeform text <-<*", "      *>/**", "      *> summary", "      *>*/")

        assert is_structured(block)
        assert parse_documentation(block).summary == "summary"

    def test_freeform_markers_ignored_in_structured_block(self) -> None:
        block = ("      *>/**", "      *>*/", "      *>-> ignored <-<*")

        assert parse_documentation(block) == DocumentationRecord()

    def test_no_opener_selects_freeform(self) -> None:
        assert not is_structured(("      *>-> text <-<*",))


class TestStructuredDialect:
    """Structured (tagged) documentation blocks."""

    def test_given_full_block_when_parsed_then_all_parts_recorded(self) -> None:
        # When
        record = parse_documentation(STRUCTURED_BLOCK)

        # Then
        assert record.summary == "Computes the invoice total. Rounds half up."
        assert record.parameters == (
            DocElement("WS-INVOICE", "invoice being totalled"),
            DocElement("WS-RATE", ""),
        )
        assert record.returns == (DocElement("WS-TOTAL", "the total"),)
        assert record.throws == (
            DocElement("INVALID-INVOICE", "when the invoice has no items"),
        )

    def test_given_blank_lines_in_summary_then_they_contribute_nothing(self) -> None:
        block = ("      *>/**", "      *> First.", "      *>", "      *>   ", "      *> Second.", "      *>*/")

        assert parse_documentation(block).summary == "First. Second."

    def test_given_text_after_tag_then_not_added_to_summary(self) -> None:
        block = (
            "      *>/**",
            "      *> Summary.",
            "      *> @param WS-A first",
            "      *> continuation of the param",
            "      *>*/",
        )

        record = parse_documentation(block)

        assert record.summary == "Summary."
        assert record.parameters == (DocElement("WS-A", "first"),)

    @pytest.mark.parametrize("tag", ["@enum", "@optional", "@default", "@extends"])
    def test_given_terminator_tag_then_summary_ends_without_elements(self, tag: str) -> None:
        block = ("      *>/**", "      *> Before.", f"      *> {tag} X", "      *> After.", "      *>*/")

        record = parse_documentation(block)

        assert record.summary == "Before."
        assert not record.has_elements

    def test_given_tag_without_name_then_dropped(self) -> None:
        block = ("      *>/**", "      *> @param", "      *> @return   ", "      *>*/")

        record = parse_documentation(block)

        assert record.parameters == ()
        assert record.returns == ()

    def test_returns_alias_accepted(self) -> None:
        block = ("      *>/**", "      *> @returns WS-OUT", "      *>*/")

        assert parse_documentation(block).returns == (DocElement("WS-OUT", ""),)

    def test_given_lines_after_closer_then_ignored(self) -> None:
        block = ("      *>/**", "      *> Inside.", "      *>*/", "      *> Outside.", "      *> @param WS-X")

        record = parse_documentation(block)

        assert record.summary == "Inside."
        assert record.parameters == ()

    def test_given_lines_before_opener_then_ignored(self) -> None:
        block = ("      *> banner", "      *>/**", "      *> Inside.", "      *>*/")

        assert parse_documentation(block).summary == "Inside."

    def test_given_unclosed_block_then_content_kept(self) -> None:
        block = ("      *>/**", "      *> Open ended.", "      *> @param WS-X value")

        record = parse_documentation(block)

        assert record.summary == "Open ended."
        assert record.parameters == (DocElement("WS-X", "value"),)


class TestStructuredDocParserStates:
    """The four-state machine driven line by line."""

    def test_state_transitions(self) -> None:
        parser = StructuredDocParser()

        assert parser.state is DocState.OUTSIDE
        assert parser.feed("      *> before") is DocState.OUTSIDE
        assert parser.feed("      *>/**") is DocState.SUMMARY
        assert parser.feed("      *> Summary.") is DocState.SUMMARY
        assert parser.feed("      *> @param WS-A") is DocState.TAGS
        assert parser.feed("      *> trailing text") is DocState.TAGS
        assert parser.feed("      *>*/") is DocState.CLOSED
        assert parser.feed("      *> @param WS-B") is DocState.CLOSED

    def test_reopened_block_continues_summary(self) -> None:
        parser = StructuredDocParser()

        record = parser.parse(
            ("      *>/**", "      *> One.", "      *>*/", "      *>/**", "      *> Two.", "      *>*/")
        )

        assert record.summary == "One. Two."

    def test_parse_resets_previous_state(self) -> None:
        parser = StructuredDocParser()
        parser.parse(STRUCTURED_BLOCK)

        record = parser.parse(("      *>/**", "      *> Fresh.", "      *>*/"))

        assert record == DocumentationRecord(summary="Fresh.")

    def test_inside_property(self) -> None:
        assert DocState.SUMMARY.inside
        assert DocState.TAGS.inside
        assert not DocState.OUTSIDE.inside
        assert not DocState.CLOSED.inside


class TestFreeformDialect:
    def test_markers_and_trailing_dots_stripped(self) -> None:
        assert parse_documentation(("      *>-> Does A. <-<*",)).summary == "Does A"

    def test_multiple_dots_stripped(self) -> None:
        assert parse_documentation(("      *>-> Wait...",)).summary == "Wait"

    def test_closer_is_optional(self) -> None:
        assert parse_documentation(("      *>-> Adds one line",)).summary == "Adds one line"

    def test_fragments_joined_with_single_space(self) -> None:
        block = ("      *>-> First line.", "      *> plain comment", "      *>-> Second line. <-<*")

        assert parse_documentation(block).summary == "First line Second line"

    def test_plain_comments_contribute_nothing(self) -> None:
        assert parse_documentation(("      *> just a comment",)) == DocumentationRecord()

    def test_empty_fragments_skipped(self) -> None:
        block = ("      *>-> ... <-<*", "      *>-> Text.")

        assert parse_documentation(block).summary == "Text"

    def test_empty_block(self) -> None:
        assert parse_documentation(()) == DocumentationRecord()
