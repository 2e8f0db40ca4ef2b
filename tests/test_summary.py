"""
Tests for plain-text summary rendering.
"""

import pytest

from recipe_engine.summary import summary_to_text


class TestSummaryToText:
    """Test cases for summary_to_text."""

    def test_tags_removed_text_kept(self):
        """Test that markup is dropped and its text content kept."""
        html = 'This recipe serves <b>4 people</b> and costs <a href="https://spoonacular.com/x">$1.20</a> per serving.'
        assert summary_to_text(html) == "This recipe serves 4 people and costs $1.20 per serving."

    def test_entities_decoded(self):
        assert summary_to_text("Salt &amp; pepper") == "Salt & pepper"

    def test_script_content_dropped(self):
        """Test that script bodies never reach the output."""
        text = summary_to_text("Tasty<script>alert('x')</script> soup")
        assert "alert" not in text
        assert text == "Tasty soup"

    @pytest.mark.parametrize("value", [None, "", "   ", 42, ["<b>x</b>"]])
    def test_missing_summary(self, value):
        assert summary_to_text(value) == ""
