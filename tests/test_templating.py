"""Tests for placeholder substitution."""

import pytest
import os

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tagsite.templating import Placeholder, page_values, render


class TestRender:
    """Test cases for render()."""

    def test_replaces_every_occurrence(self):
        """Test that a token is replaced everywhere it appears."""
        result = render("$TITLE | $TITLE", {Placeholder.TITLE: "Home"})
        assert result == "Home | Home"

    def test_empty_map_returns_template_unchanged(self):
        """Test that rendering with no values is the identity."""
        template = "<h1>$TITLE</h1>$CONTENT$NAVCLOUD"
        assert render(template, {}) == template

    def test_unmatched_placeholders_left_verbatim(self):
        """Test that tokens without a value stay in the output."""
        result = render("$CONTENT $NAVCLOUD", {Placeholder.CONTENT: "body"})
        assert result == "body $NAVCLOUD"

    def test_missing_token_in_template_is_harmless(self):
        """Test that a value for a token the template lacks is ignored."""
        result = render("<p>$CONTENT</p>", page_values("x", "t", "cloud"))
        assert result == "<p>x</p>"

    def test_replaced_keys_do_not_remain(self):
        """Test that no replaced token survives when values are plain text."""
        template = "$TITLE $CONTENT $NAVCLOUD $TITLE"
        result = render(template, page_values("c", "t", "n"))
        for placeholder in Placeholder:
            assert placeholder.value not in result

    def test_value_not_rescanned_for_same_key(self):
        """Test that an inserted value containing its own token is kept literally."""
        result = render("$TITLE", {Placeholder.TITLE: "$TITLE!"})
        assert result == "$TITLE!"

    def test_later_key_matches_inside_earlier_value(self):
        """Test that a $TITLE token inside inserted content picks up the title."""
        result = render("$CONTENT", page_values("<p>$TITLE</p>", "Home"))
        assert result == "<p>Home</p>"

    def test_does_not_escape_html(self):
        """Test that values are inserted raw."""
        result = render("$CONTENT", {Placeholder.CONTENT: "<b>&</b>"})
        assert result == "<b>&</b>"

    def test_rejects_string_keys(self):
        """Test that only Placeholder members are accepted as keys."""
        with pytest.raises(TypeError):
            render("$TITLE", {"$TITLE": "x"})


class TestPageValues:
    """Test cases for page_values()."""

    def test_defaults_navcloud_to_empty(self):
        """Test that pages other than home get an empty nav cloud."""
        values = page_values("body", "title")
        assert values == {
            Placeholder.CONTENT: "body",
            Placeholder.TITLE: "title",
            Placeholder.NAVCLOUD: "",
        }

    def test_placeholder_tokens(self):
        """Test the literal tokens the template must contain."""
        assert Placeholder.CONTENT.value == '$CONTENT'
        assert Placeholder.TITLE.value == '$TITLE'
        assert Placeholder.NAVCLOUD.value == '$NAVCLOUD'
