"""Tests for post-render HTML directives."""

import pytest

from wikimd.directives import (
    AttributeKind,
    DirectiveMutation,
    ElementTarget,
    apply_directives,
    parse_directive,
    strip_directives,
)
from wikimd.errors import UnknownDirectiveError


class TestVocabulary:
    @pytest.mark.parametrize("token", ["s", "st", "sty", "styl", "style"])
    def test_style_abbreviations(self, token):
        assert AttributeKind.from_token(token) is AttributeKind.STYLE

    @pytest.mark.parametrize("token", ["p", "pa", "par", "pare", "paren", "parent"])
    def test_parent_abbreviations(self, token):
        assert ElementTarget.from_token(token) is ElementTarget.PARENT

    @pytest.mark.parametrize("token", ["xyz", "styles", "class", "S"])
    def test_unknown_attribute(self, token):
        with pytest.raises(UnknownDirectiveError) as exc_info:
            AttributeKind.from_token(token)
        assert exc_info.value.kind == "attribute"
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", ["child", "parents", "x"])
    def test_unknown_element(self, token):
        with pytest.raises(UnknownDirectiveError) as exc_info:
            ElementTarget.from_token(token)
        assert exc_info.value.kind == "element"
        assert f"Element type `{token}` unknown" in str(exc_info.value)


class TestParseDirective:
    def test_no_marker(self):
        assert parse_directive("plain text") is None

    def test_marker(self):
        directive = parse_directive("Hello '{par sty color:red; margin:0}' world")
        assert directive.target is ElementTarget.PARENT
        assert directive.attribute is AttributeKind.STYLE
        assert directive.data == "color:red; margin:0"

    def test_only_first_marker(self):
        directive = parse_directive("'{p s color:red}' '{p s color:blue}'")
        assert directive.data == "color:red"


class TestApplyDirectives:
    def test_parent_gains_style(self):
        html = "<p>'{parent style color:red}'Hello</p>"
        assert apply_directives(html) == '<p style="color:red">Hello</p>'

    def test_marker_removed_from_output(self):
        result = apply_directives("<div><p>Text '{p s color:red}'</p></div>")
        assert "'{" not in result
        assert '<p style="color:red">Text </p>' in result

    def test_nested_inline_parent(self):
        result = apply_directives("<p>Some <em>word '{p s font-weight:bold}'</em></p>")
        assert '<em style="font-weight:bold">' in result
        assert "<p>" in result

    def test_last_write_wins(self):
        result = apply_directives("<p>'{p s color:red}'<em>x</em>'{p s color:blue}'</p>")
        assert result == '<p style="color:blue"><em>x</em></p>'

    def test_existing_style_overwritten(self):
        result = apply_directives('<p style="margin:0">A \'{p s color:red}\'</p>')
        assert result == '<p style="color:red">A </p>'

    def test_top_level_text_marker_still_stripped(self):
        result = apply_directives("'{p s color:red}' loose text")
        assert result == " loose text"

    def test_comment_not_applied_but_stripped(self):
        result = apply_directives("<p><!-- '{p s color:red}' --></p>")
        assert "style" not in result
        assert "'{" not in result

    def test_unknown_type_aborts(self):
        with pytest.raises(UnknownDirectiveError):
            apply_directives("<p>'{parent xyz data}'</p>")

    def test_unknown_element_aborts(self):
        with pytest.raises(UnknownDirectiveError):
            apply_directives("<p>'{sibling style color:red}'</p>")

    def test_html_without_markers_unchanged(self):
        html = '<h1>Title</h1>\n<p>Text with <a href="x.html">link</a></p>'
        assert apply_directives(html) == html


class TestStripDirectives:
    def test_strips_all(self):
        assert strip_directives("a'{p s x}'b'{q t y}'c") == "abc"


class TestDirectiveMutation:
    def test_is_frozen(self):
        mutation = DirectiveMutation(node_index=0, attribute="style", value="x")
        with pytest.raises(AttributeError):
            mutation.value = "y"
