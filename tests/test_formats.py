"""Tests for placeholder substitution."""

from pagebreak.formats import DEFAULT_META_FORMAT, Placeholder, resolve_format


class TestResolveFormat:
    """Tests for resolve_format."""

    def test_default_meta_format(self):
        """The default metadata format appends the page number."""
        values = {Placeholder.NUM: "2", Placeholder.CONTENT: "Blog"}

        assert resolve_format(DEFAULT_META_FORMAT, values) == "Blog | Page 2"

    def test_relative_placeholders(self):
        """Relative link placeholders are substituted like any other."""
        values = {
            Placeholder.CONTENT: "style.css",
            Placeholder.REL_FROM: "../../",
            Placeholder.REL_TO: "page/2/",
        }

        assert resolve_format(":rel-from:content", values) == "../../style.css"
        assert resolve_format(":content:rel-to", {
            Placeholder.CONTENT: "https://example.com/",
            Placeholder.REL_TO: "page/2/",
        }) == "https://example.com/page/2/"

    def test_missing_values_are_left_in_place(self):
        """Placeholders without a value stay in the output."""
        result = resolve_format("./page/:num/:content", {Placeholder.NUM: "3"})

        assert result == "./page/3/:content"

    def test_substituted_text_is_not_rescanned(self):
        """Content containing placeholder tokens is inserted literally."""
        values = {Placeholder.NUM: "2", Placeholder.CONTENT: "About :num and :rel-to"}

        result = resolve_format(":content | Page :num", values)

        assert result == "About :num and :rel-to | Page 2"

    def test_repeated_placeholders(self):
        """Every occurrence of a placeholder is replaced."""
        values = {Placeholder.NUM: "4"}

        assert resolve_format(":num of :num", values) == "4 of 4"

    def test_template_without_placeholders(self):
        """Plain text passes through unchanged."""
        assert resolve_format("Archive", {Placeholder.NUM: "2"}) == "Archive"
