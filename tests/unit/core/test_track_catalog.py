"""Unit tests for caption track catalog parsing."""

import pytest

from conftest import load_fixture
from youtube_transcripts.core.track_catalog import parse_attributes, parse_track_catalog
from youtube_transcripts.models import CaptionTrack, TrackKind


class TestParseAttributes:
    """Tests for attribute extraction from one element."""

    def test_mixed_quoting(self):
        attrs = parse_attributes(' id=2 lang_code="es" name=\'Español\'')
        assert attrs == {"id": "2", "lang_code": "es", "name": "Español"}

    def test_keys_are_lowercased_and_values_unescaped(self):
        attrs = parse_attributes(' LANG_CODE="en" name="Tom &amp; Jerry&#39;s"')
        assert attrs["lang_code"] == "en"
        assert attrs["name"] == "Tom & Jerry's"

    def test_first_duplicate_wins(self):
        assert parse_attributes(' lang_code="en" lang_code="fr"')["lang_code"] == "en"


class TestParseTrackCatalog:
    """Tests for parse_track_catalog()."""

    def test_basic_listing_preserves_order(self, listing_document):
        tracks = parse_track_catalog(listing_document)

        assert [t.language_code for t in tracks] == ["fr", "en-US", "de"]
        assert tracks[0] == CaptionTrack(language_code="fr", display_name="", kind=None, variant_id="0")
        assert tracks[1].kind == TrackKind.AUTOMATIC
        assert tracks[2].display_name == "Director's commentary"
        assert tracks[2].variant_id == "2"

    def test_malformed_elements_are_skipped(self):
        tracks = parse_track_catalog(load_fixture("listing_malformed.xml"))

        assert [(t.language_code, t.kind) for t in tracks] == [
            ("es", None),
            ("pt-BR", TrackKind.AUTOMATIC),
            ("ja", "forced"),
        ]

    def test_track_without_language_code_is_absent(self):
        with_missing = (
            '<transcript_list><track id="0" name="x"/>'
            '<track id="1" lang_code="en"/></transcript_list>'
        )
        without = '<transcript_list><track id="1" lang_code="en"/></transcript_list>'

        assert parse_track_catalog(with_missing) == parse_track_catalog(without)

    @pytest.mark.parametrize("document", [
        None,
        "",
        "   ",
        load_fixture("listing_empty.xml"),
        "<html><body>Sorry, something went wrong</body></html>",
        "not markup at all",
    ])
    def test_no_usable_tracks_yields_empty_list(self, document):
        assert parse_track_catalog(document) == []

    def test_every_track_has_language_code(self):
        for track in parse_track_catalog(load_fixture("listing_malformed.xml")):
            assert track.language_code.strip()
