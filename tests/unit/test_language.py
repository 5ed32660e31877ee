"""Unit tests for language normalization and track types."""

import pytest

from mkvtool.models.track import parse_track_type
from mkvtool.utils.language import normalize_language, normalize_languages


class TestNormalizeLanguage:
    """Test language code normalization."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("en", "eng"),
            ("FR", "fre"),
            ("eng", "eng"),
            ("JPN", "jpn"),
            ("Japanese", "jpn"),
            ("default", "default"),
            ("xx", "xx"),
            ("", ""),
        ],
    )
    def test_normalize(self, code, expected):
        assert normalize_language(code) == expected

    def test_keeps_order(self):
        assert normalize_languages(["de", "default", "en"]) == ["ger", "default", "eng"]


class TestParseTrackType:
    """Test track type aliases."""

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("a", "audio"),
            ("aud", "audio"),
            ("v", "video"),
            ("vid", "video"),
            ("s", "subtitles"),
            ("sub", "subtitles"),
            ("subtitles", "subtitles"),
            ("S", "subtitles"),
        ],
    )
    def test_aliases(self, alias, expected):
        assert parse_track_type(alias) == expected

    def test_invalid(self):
        with pytest.raises(ValueError, match="invalid track type"):
            parse_track_type("x")
