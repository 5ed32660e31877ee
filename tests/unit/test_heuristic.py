"""Unit tests for release name parsing and file name formatting."""

import pytest

from mkvtool.core.mask import UnresolvedFieldsError
from mkvtool.core.renamer import format_name, rename_file
from mkvtool.metadata.heuristic import parse_release_name


class TestParseReleaseName:
    """Test release name heuristics."""

    def test_scene_episode(self):
        info = parse_release_name("Show.Name.S01E02.Episode.Name.720p.HDTV.x264-KILLERS.mkv")

        assert info.title == "Show Name"
        assert info.season == 1
        assert info.episode == 2
        assert info.episodename == "Episode Name"
        assert info.resolution == "720p"
        assert info.quality == "HDTV"
        assert info.codec == "x264"
        assert info.group == "KILLERS"
        assert info.container == "mkv"
        assert info.year == 0

    def test_spaced_episode_with_year(self):
        info = parse_release_name("Series Title S01E02 HDTV x264 (2022) [1080p] FOOBAR.mkv")

        assert info.title == "Series Title"
        assert info.year == 2022
        assert info.resolution == "1080p"
        assert info.episodename == ""

    def test_alternate_episode_format(self):
        info = parse_release_name("Show Name 3x07 WEB.mp4")

        assert info.title == "Show Name"
        assert (info.season, info.episode) == (3, 7)
        assert info.quality == "WEB"
        assert info.container == "mp4"

    def test_movie(self):
        info = parse_release_name("The.Movie.Title.2019.1080p.BluRay.DTS.x265-GRP.mkv")

        assert info.title == "The Movie Title"
        assert info.year == 2019
        assert info.quality == "BluRay"
        assert info.audio == "DTS"
        assert info.codec == "x265"
        assert info.season == 0

    def test_last_year_wins(self):
        info = parse_release_name("Blade Runner 2049 (2017).mkv")

        assert info.title == "Blade Runner 2049"
        assert info.year == 2017

    def test_markers(self):
        info = parse_release_name("Movie.2010.EXTENDED.PROPER.REPACK.720p.BRRip.mkv")

        assert info.extended == "EXTENDED"
        assert info.proper == "PROPER"
        assert info.repack == "REPACK"
        assert info.quality == "BRRip"

    def test_website_prefix(self):
        info = parse_release_name("[ www.site.org ] Movie Name 2005 DVDRip.avi")

        assert info.website == "www.site.org"
        assert info.title == "Movie Name"
        assert info.container == "avi"

    def test_hyphenated_title_is_not_a_group(self):
        info = parse_release_name("Spider-Man.mkv")

        assert info.title == "Spider-Man"
        assert info.group == ""

    def test_title_words_are_not_markers(self):
        info = parse_release_name("Charlotte's Web 2006.mkv")

        assert info.title == "Charlotte's Web"
        assert info.quality == ""

    def test_unknown_extension_is_kept(self):
        info = parse_release_name("Some Title.txt")

        assert info.container == ""
        assert info.title == "Some Title txt"

    def test_directories_are_ignored(self):
        info = parse_release_name("/media/2021/Show.S02E03.mkv")

        assert info.title == "Show"
        assert info.year == 0

    def test_as_fields(self):
        fields = parse_release_name("Show.S01E02.mkv").as_fields()

        assert fields["title"] == "Show"
        assert fields["season"] == 1
        assert fields["year"] == 0
        assert fields["episodename"] == ""


class TestFormatName:
    """Test formatting of parsed release names."""

    def test_basic(self):
        got = format_name(
            "%{title} %{season} %{episode} %{quality} %{codec} %{year} %{resolution}",
            "Series Title S01E02 HDTV x264 (2022) [1080p] FOOBAR.mkv",
        )

        assert got == "Series Title 1 2 HDTV x264 2022 1080p"

    def test_formatting_specifiers(self):
        got = format_name(
            "%{title} S%02.2{season}E%02.2{episode} [%{resolution}]",
            "Series Title S01E02 (2022) [1080p].mkv",
        )

        assert got == "Series Title S01E02 [1080p]"

    def test_title_capitalization(self):
        got = format_name("%{title} %{year}", "a bad title that makes one of a kind 2022.mkv")

        assert got == "A Bad Title That Makes One Of a Kind 2022"

    def test_invalid_tag(self):
        with pytest.raises(UnresolvedFieldsError) as excinfo:
            format_name(
                "%{bad} S%02.2{season}E%02.2{episode} [%{resolution}]",
                "Series Title S01E02 [1080p].mkv",
            )

        assert excinfo.value.tokens == ["%{bad}"]

    def test_missing_information(self):
        with pytest.raises(UnresolvedFieldsError) as excinfo:
            format_name(
                "%{title} S%02.2{season}E%02.2{episode} (%{year}) [%{resolution}]",
                "Series Title S01E02 [1080p].mkv",
            )

        assert excinfo.value.tokens == ["%{year}"]


class TestRenameFile:
    """Test renaming files on disk."""

    def test_rename(self, tmp_path):
        path = tmp_path / "the.movie.2019.1080p.BluRay.x264-GRP.mkv"
        path.write_bytes(b"data")

        new_path = rename_file("%{title} (%{year}).%{container}", path)

        assert new_path == tmp_path / "The Movie (2019).mkv"
        assert new_path.read_bytes() == b"data"
        assert not path.exists()

    def test_dry_run_leaves_file(self, tmp_path):
        path = tmp_path / "the.movie.2019.mkv"
        path.write_bytes(b"")

        new_path = rename_file("%{title}.%{container}", path, dry_run=True)

        assert new_path == tmp_path / "The Movie.mkv"
        assert path.exists()
        assert not new_path.exists()

    def test_refuses_to_overwrite(self, tmp_path):
        path = tmp_path / "the.movie.2019.mkv"
        path.write_bytes(b"")
        (tmp_path / "The Movie.mkv").write_bytes(b"other")

        with pytest.raises(FileExistsError):
            rename_file("%{title}.%{container}", path)

        assert path.exists()

    def test_unresolved_mask_leaves_file(self, tmp_path):
        path = tmp_path / "the.movie.mkv"
        path.write_bytes(b"")

        with pytest.raises(UnresolvedFieldsError):
            rename_file("%{title} (%{year}).mkv", path)

        assert path.exists()
