"""
Unit Tests for Message Tree Models

Tests for node construction, invariants and Message helpers.
"""

import pytest

from pseudoloc.core.models import (
    Argument,
    Branch,
    FormatKind,
    Formatted,
    Literal,
    Location,
    Message,
    Plural,
    Pound,
    Select,
    is_literal,
)


class TestNodes:
    """Tests for individual node dataclasses."""

    # ─────────────────────────────────────────────────────────────────────────
    # Constructor Tests
    # ─────────────────────────────────────────────────────────────────────────

    def test_literal_when_created_then_location_defaults_to_none(self):
        """Literal location is optional."""
        lit = Literal("Hello")
        assert lit.text == "Hello"
        assert lit.location is None

    def test_literal_when_frozen_then_immutable(self):
        """Literals should be immutable (frozen)."""
        lit = Literal("Hello")
        with pytest.raises(AttributeError):
            lit.text = "Bye"  # type: ignore

    def test_with_text_when_called_then_keeps_location(self):
        """with_text() replaces text only."""
        lit = Literal("Hello", Location(2, 4))
        copy = lit.with_text("Bye")
        assert copy == Literal("Bye", Location(2, 4))
        assert lit.text == "Hello"

    def test_location_when_line_zero_then_raises_error(self):
        """Lines are 1-based."""
        with pytest.raises(ValueError, match="line must be >= 1"):
            Location(0, 0)

    def test_location_when_negative_column_then_raises_error(self):
        with pytest.raises(ValueError, match="column must be >= 0"):
            Location(1, -1)

    def test_argument_when_empty_name_then_raises_error(self):
        """Placeholder names cannot be empty."""
        with pytest.raises(ValueError, match="name cannot be empty"):
            Argument("")

    def test_formatted_when_kind_is_string_then_coerced_to_enum(self):
        """Formatted accepts plain strings for kind."""
        node = Formatted("n", "number")  # type: ignore[arg-type]
        assert node.kind is FormatKind.NUMBER

    def test_formatted_when_unknown_kind_then_raises_error(self):
        with pytest.raises(ValueError):
            Formatted("n", "currency")  # type: ignore[arg-type]

    def test_plural_when_no_branches_then_raises_error(self):
        """Plural needs at least one branch."""
        with pytest.raises(ValueError, match="at least one branch"):
            Plural("count", ())

    def test_plural_when_duplicate_keys_then_raises_error(self):
        """Branch keys must be unique."""
        branches = (
            Branch("one", Message((Literal("a"),))),
            Branch("one", Message((Literal("b"),))),
        )
        with pytest.raises(ValueError, match="duplicate branch keys"):
            Plural("count", branches)

    def test_plural_when_negative_offset_then_raises_error(self):
        with pytest.raises(ValueError, match="offset cannot be negative"):
            Plural("count", (Branch("other", Message()),), offset=-1)

    def test_select_when_no_branches_then_raises_error(self):
        with pytest.raises(ValueError, match="at least one branch"):
            Select("gender", ())

    def test_branch_when_empty_key_then_raises_error(self):
        with pytest.raises(ValueError, match="key cannot be empty"):
            Branch("", Message())

    def test_pound_when_compared_then_all_equal(self):
        """Pound has no payload, so every instance is equal."""
        assert Pound() == Pound()

    def test_is_literal_when_called_then_distinguishes_kinds(self):
        assert is_literal(Literal("x")) is True
        assert is_literal(Argument("x")) is False
        assert is_literal(Pound()) is False


class TestMessage:
    """Tests for the Message container."""

    def test_init_when_list_given_then_stored_as_tuple(self):
        """Nodes are normalized to a tuple so messages stay hashable."""
        msg = Message([Literal("a")])  # type: ignore[arg-type]
        assert msg.nodes == (Literal("a"),)
        assert hash(msg) == hash(Message((Literal("a"),)))

    def test_literals_when_mixed_then_returns_top_level_literals(self, plural_message):
        """literals ignores text nested in plural branches."""
        assert [lit.text for lit in plural_message.literals] == ["You have ", " in ", "."]

    def test_placeholders_when_mixed_then_returns_in_order(self, mixed_message):
        kinds = [type(node).__name__ for node in mixed_message.placeholders]
        assert kinds == ["Argument", "Select", "Formatted", "Formatted"]

    def test_iter_all_when_nested_then_visits_branches_pre_order(self, plural_message):
        """iter_all descends into branch messages after their owner."""
        nodes = list(plural_message.iter_all())
        assert nodes[0] == Literal("You have ", Location(1, 0))
        assert isinstance(nodes[1], Plural)
        assert nodes[2:6] == [Pound(), Literal(" file"), Pound(), Literal(" files")]
        assert nodes[6:] == [Literal(" in "), Argument("folder"), Literal(".")]

    def test_len_and_iter_when_called_then_match_nodes(self, mixed_message):
        assert len(mixed_message) == 8
        assert list(mixed_message) == list(mixed_message.nodes)
