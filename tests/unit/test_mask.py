"""Unit tests for format mask rendering."""

import pytest

from mkvtool.core.mask import (
    Literal,
    MalformedMaskError,
    Token,
    UnresolvedFieldsError,
    render_mask,
    title_case,
    tokenize,
)


class TestTokenize:
    """Test mask tokenization."""

    def test_literal_only(self):
        assert tokenize("plain name.mkv") == [Literal("plain name.mkv")]

    def test_empty_mask(self):
        assert tokenize("") == []

    def test_tokens_and_literals(self):
        segments = tokenize("%{title} S%02.2{season}.mkv")

        assert segments == [
            Token("%{title}", "", "title"),
            Literal(" S"),
            Token("%02.2{season}", "02.2", "season"),
            Literal(".mkv"),
        ]

    def test_adjacent_tokens(self):
        segments = tokenize("%{title}%-10{group}")

        assert segments == [Token("%{title}", "", "title"), Token("%-10{group}", "-10", "group")]

    def test_percent_sign_without_brace_is_literal(self):
        assert tokenize("100% %d") == [Literal("100% %d")]

    def test_unclosed_token_is_malformed(self):
        with pytest.raises(MalformedMaskError) as excinfo:
            tokenize("%{title} %{year")

        assert excinfo.value.position == 9

    def test_uppercase_field_is_malformed(self):
        with pytest.raises(MalformedMaskError):
            tokenize("%{Title}")

    def test_empty_field_is_malformed(self):
        with pytest.raises(MalformedMaskError):
            tokenize("%02{}")


class TestRenderMask:
    """Test mask rendering."""

    def test_series_mask(self):
        """Should render strings and zero padded numbers."""
        fields = {"title": "foo", "season": 1, "episode": 2}

        assert render_mask(fields, "%{title} S%02.2{season}E%02.2{episode}") == "Foo S01E02"

    def test_title_capitalization(self):
        assert render_mask({"title": "a bad title"}, "%{title}") == "A Bad Title"
        assert render_mask({"title": "the bad title"}, "%{title}") == "The Bad Title"

    def test_minor_words_lowercase_inside_title(self):
        fields = {"title": "a bad title that makes one of a kind"}

        assert render_mask(fields, "%{title}") == "A Bad Title That Makes One Of a Kind"

    def test_only_title_is_capitalized(self):
        fields = {"title": "show", "group": "lol", "quality": "hdtv"}

        assert render_mask(fields, "%{title}-%{group}.%{quality}") == "Show-lol.hdtv"

    def test_string_width_and_precision(self):
        fields = {"group": "GROUP"}

        assert render_mask(fields, "[%-8{group}]") == "[GROUP   ]"
        assert render_mask(fields, "[%8{group}]") == "[   GROUP]"
        assert render_mask(fields, "[%.3{group}]") == "[GRO]"

    def test_integer_width(self):
        assert render_mask({"year": 2022}, "(%6{year})") == "(  2022)"

    def test_missing_field_fails(self):
        with pytest.raises(UnresolvedFieldsError) as excinfo:
            render_mask({}, "%{year}")

        assert excinfo.value.tokens == ["%{year}"]

    def test_zero_number_is_unset(self):
        with pytest.raises(UnresolvedFieldsError):
            render_mask({"season": 0}, "%{season}")

    def test_negative_number_is_unset(self):
        with pytest.raises(UnresolvedFieldsError):
            render_mask({"episode": -1}, "%{episode}")

    def test_empty_string_is_unset(self):
        with pytest.raises(UnresolvedFieldsError):
            render_mask({"group": ""}, "%{group}")

    def test_all_unresolved_tokens_are_reported(self):
        """Should list every unresolved token, in mask order."""
        fields = {"title": "movie", "year": 2020, "season": 0}

        with pytest.raises(UnresolvedFieldsError) as excinfo:
            render_mask(fields, "%{title} S%02.2{season}E%02.2{episode} %{bad} (%{year})")

        assert excinfo.value.tokens == ["%02.2{season}", "%02.2{episode}", "%{bad}"]
        assert "%02.2{season}" in str(excinfo.value)
        assert "%{bad}" in str(excinfo.value)

    @pytest.mark.parametrize(
        "fields,mask",
        [
            ({"title": "x"}, "Movie: %99999999999999999999{title}"),
            ({"year": 2020}, "Movie: %.99999999999999999999{year}"),
        ],
    )
    def test_oversized_width_is_malformed(self, fields, mask):
        """Should report size specifications Python cannot format."""
        with pytest.raises(MalformedMaskError) as excinfo:
            render_mask(fields, mask)

        assert excinfo.value.position == 7

    def test_field_keys_are_case_insensitive(self):
        assert render_mask({"Title": "foo", "Year": 1999}, "%{title} %{year}") == "Foo 1999"

    @pytest.mark.parametrize(
        "fields",
        [{}, {"title": "x"}, {"season": 0, "group": ""}],
    )
    def test_literal_mask_is_unchanged(self, fields):
        """Should return a mask without tokens as is, whatever the fields."""
        mask = "Some Movie (2001) 100%.mkv"

        assert render_mask(fields, mask) == mask


class TestTitleCase:
    """Test title capitalization."""

    def test_lowercases_rest_of_word(self):
        assert title_case("THE LORD OF THE RINGS") == "The Lord Of the Rings"

    def test_minor_word_first(self):
        assert title_case("an american tail") == "An American Tail"

    def test_keeps_whitespace(self):
        assert title_case("on  the road") == "On  the Road"

    def test_hyphen_separates_words(self):
        assert title_case("spider-man: far from home") == "Spider-Man: Far From Home"

    def test_minor_word_after_hyphen(self):
        assert title_case("back-to-school") == "Back-to-School"
