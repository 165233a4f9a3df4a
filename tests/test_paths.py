"""Tests for lexical path helpers."""

import pytest

from wikimd.links.paths import (
    clean_path,
    encode_spaces,
    has_scheme,
    normalize_path,
    relative_path,
)


class TestEncodeSpaces:
    def test_spaces_encoded(self):
        assert encode_spaces("foo with spaces.png") == "foo%20with%20spaces.png"

    def test_no_spaces_unchanged(self):
        assert encode_spaces("foo.png") == "foo.png"


class TestCleanPath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("a/./b/../c", "a/c"),
            ("../foo.png", "../foo.png"),
            ("../../a/../b", "../../b"),
            ("/abs/path/../images/foo.png", "/abs/images/foo.png"),
            ("/../x", "/x"),
            ("a//b/", "a/b"),
            ("a/..", "."),
            ("./", "."),
            ("/", "/"),
        ],
    )
    def test_lexical_cleaning(self, raw, expected):
        assert clean_path(raw) == expected

    def test_empty_passes_through(self):
        assert clean_path("") == ""

    def test_url_with_scheme_untouched(self):
        assert clean_path("https://example.com//docs/../x") == "https://example.com//docs/../x"

    def test_fragment_only_untouched(self):
        assert clean_path("#section") == "#section"


class TestHasScheme:
    def test_http(self):
        assert has_scheme("http://example.com")

    def test_mailto(self):
        assert has_scheme("mailto:me@example.com")

    def test_relative_path(self):
        assert not has_scheme("images/foo.png")


class TestNormalizePath:
    def test_cleans_and_encodes(self):
        assert normalize_path("a/../b c/./d.png") == "b%20c/d.png"

    def test_idempotent(self):
        once = normalize_path("../x y/./z.png")
        assert normalize_path(once) == once


class TestRelativePath:
    def test_sibling_directory(self):
        assert (
            relative_path("/abs/path/to/Document/foo.xyz", "/abs/path/to/whatever")
            == "../Document/foo.xyz"
        )

    def test_uncleaned_target(self):
        assert (
            relative_path("/a/b/bar/../foo.png", "/a/b/site/bar/")
            == "../../foo.png"
        )
