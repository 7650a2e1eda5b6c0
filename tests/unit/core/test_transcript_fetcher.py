"""Unit tests for the transcript acquisition pipeline."""

import asyncio
from dataclasses import replace

import pytest

from conftest import FakeSession, HangingResponse, fail, load_fixture, respond
from youtube_transcripts.core.config import ScoringWeights, TimedTextConfig, TranscriptOptions
from youtube_transcripts.core.exceptions import ConfigurationError, InvalidVideoIdError
from youtube_transcripts.core.transcript_fetcher import TranscriptAcquirer, acquire_transcript
from youtube_transcripts.models import TrackKind, TranscriptOutcome

FR_AND_EN_US = (
    '<transcript_list>'
    '<track id="0" name="" lang_code="fr"/>'
    '<track id="1" name="" lang_code="en-US" kind="asr"/>'
    '</transcript_list>'
)


async def run(test_config, *responses, video_id="abc123", options=None):
    session = FakeSession(*responses)
    acquirer = TranscriptAcquirer(config=test_config, session=session)
    result = await acquirer.acquire_transcript(video_id, options)
    return result, session


class TestPipelineOutcomes:
    """Each terminal state of the pipeline."""

    @pytest.mark.asyncio
    async def test_direct_hit(self, test_config, vtt_payload):
        result, session = await run(test_config, respond(vtt_payload))

        assert result.outcome == TranscriptOutcome.DIRECT_HIT
        assert result.text.startswith("Hello and welcome")
        assert result.language_code == "en"
        assert result.track_kind is None
        assert result.video_id == "abc123"
        assert not result.is_degraded
        assert len(session.requests) == 1

    @pytest.mark.asyncio
    async def test_track_hit_after_empty_direct_fetch(self, test_config):
        result, session = await run(
            test_config,
            respond(""),
            respond(FR_AND_EN_US),
            respond("WEBVTT\n\n00:00.000 --> 00:02.000\nhello from the US\n"),
        )

        assert result.outcome == TranscriptOutcome.TRACK_HIT
        assert result.text == "hello from the US"
        assert result.language_code == "en-US"
        assert result.track_kind == TrackKind.AUTOMATIC
        assert result.is_degraded
        assert [r["params"].get("type") for r in session.requests] == [None, "list", None]
        assert session.requests[2]["params"]["lang"] == "en-US"
        assert session.requests[2]["params"]["kind"] == "asr"

    @pytest.mark.asyncio
    async def test_direct_xml_without_cues_falls_through(self, test_config):
        empty_xml = '<?xml version="1.0" encoding="utf-8" ?><transcript></transcript>'
        result, session = await run(test_config, respond(empty_xml), respond(FR_AND_EN_US), respond("bonjour"))

        assert result.outcome == TranscriptOutcome.TRACK_HIT
        assert result.text == "bonjour"
        assert [r["params"].get("type") for r in session.requests] == [None, "list", None]

    @pytest.mark.asyncio
    async def test_direct_transport_error_falls_through(self, test_config, listing_document):
        result, session = await run(test_config, fail(), respond(listing_document), respond("texte"))

        assert result.outcome == TranscriptOutcome.TRACK_HIT
        assert result.language_code == "en-US"
        assert len(session.requests) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("listing_response", [respond("", status=500), respond("x", status=429), fail()])
    async def test_list_unavailable(self, test_config, listing_response):
        result, session = await run(test_config, respond(""), listing_response)

        assert result.outcome == TranscriptOutcome.LIST_UNAVAILABLE
        assert result.text == ""
        assert result.language_code is None
        assert len(session.requests) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("listing", [
        "",
        load_fixture("listing_empty.xml"),
        '<transcript_list><track id="0" name="no lang"/></transcript_list>',
    ])
    async def test_no_tracks_found(self, test_config, listing):
        result, session = await run(test_config, respond(""), respond(listing))

        assert result.outcome == TranscriptOutcome.NO_TRACKS_FOUND
        assert result.text == ""
        assert len(session.requests) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("track_response", [respond(""), respond("WEBVTT\n\n"), respond("x", status=404), fail()])
    async def test_empty_track_payload_keeps_provenance(self, test_config, track_response):
        result, session = await run(test_config, respond(""), respond(FR_AND_EN_US), track_response)

        assert result.outcome == TranscriptOutcome.EMPTY_TRACK_PAYLOAD
        assert result.text == ""
        assert result.language_code == "en-US"
        assert result.track_kind == TrackKind.AUTOMATIC
        assert len(session.requests) == 3


class TestPipelineProperties:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("responses", [
        (respond("direct text"),),
        (respond(""), respond(FR_AND_EN_US), respond("track text")),
        (respond(""), respond("", status=503)),
        (respond(""), respond("")),
        (respond(""), respond(FR_AND_EN_US), respond("")),
    ])
    async def test_text_present_exactly_for_hits(self, test_config, responses):
        result, _ = await run(test_config, *responses)
        assert bool(result.text) == (result.outcome in (TranscriptOutcome.DIRECT_HIT, TranscriptOutcome.TRACK_HIT))
        assert result.success == bool(result.text)

    @pytest.mark.asyncio
    async def test_named_track_provenance(self, test_config):
        listing = '<transcript_list><track id="7" name="Director&#39;s cut" lang_code="en"/></transcript_list>'
        result, session = await run(test_config, respond(""), respond(listing), respond("words"))

        assert result.track_name == "Director's cut"
        assert result.track_kind is None
        assert not result.is_degraded
        assert session.requests[2]["params"]["name"] == "Director's cut"

    @pytest.mark.asyncio
    async def test_cancellation_stops_pipeline(self, test_config):
        hanging = HangingResponse()
        session = FakeSession(hanging, respond("<transcript_list/>"))
        acquirer = TranscriptAcquirer(config=test_config, session=session)

        task = asyncio.ensure_future(acquirer.acquire_transcript("abc123"))
        await hanging.started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert len(session.requests) == 1

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_independent(self, test_config):
        first = TranscriptAcquirer(config=test_config, session=FakeSession(respond("one")))
        second = TranscriptAcquirer(config=test_config, session=FakeSession(respond(""), respond("")))

        a, b = await asyncio.gather(first.acquire_transcript("vid1"), second.acquire_transcript("vid2"))

        assert (a.outcome, a.video_id) == (TranscriptOutcome.DIRECT_HIT, "vid1")
        assert (b.outcome, b.video_id) == (TranscriptOutcome.NO_TRACKS_FOUND, "vid2")


class TestOptionsAndFaults:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("video_id", ["", "   ", None, 42])
    async def test_invalid_video_id_raises(self, test_config, video_id):
        session = FakeSession()
        with pytest.raises(InvalidVideoIdError):
            await TranscriptAcquirer(config=test_config, session=session).acquire_transcript(video_id)
        assert session.requests == []

    def test_malformed_configuration_raises(self, test_config):
        broken = replace(test_config, timedtext=TimedTextConfig(base_url="", caption_format="vtt", request_timeout=5))
        with pytest.raises(ConfigurationError):
            TranscriptAcquirer(config=broken, session=FakeSession())

    @pytest.mark.asyncio
    async def test_malformed_options_raise(self, test_config):
        with pytest.raises(ConfigurationError):
            await run(test_config, options=TranscriptOptions(request_timeout=0))
        with pytest.raises(ConfigurationError):
            await run(test_config, options=TranscriptOptions(preferred_languages=()))

    @pytest.mark.asyncio
    async def test_language_option_drives_direct_fetch_and_scoring(self, test_config, listing_document):
        result, session = await run(
            test_config,
            respond(""),
            respond(listing_document),
            respond("Guten Tag"),
            options=TranscriptOptions(preferred_language="de"),
        )

        assert session.requests[0]["params"]["lang"] == "de"
        assert result.outcome == TranscriptOutcome.TRACK_HIT
        assert result.language_code == "de"
        assert not result.is_degraded

    @pytest.mark.asyncio
    async def test_weights_option(self, test_config):
        weights = ScoringWeights(exact_language=0, primary_subtag=0, other_language=500)
        result, _ = await run(
            test_config, respond(""), respond(FR_AND_EN_US), respond("bonjour"),
            options=TranscriptOptions(weights=weights),
        )
        assert result.language_code == "fr"

    @pytest.mark.asyncio
    async def test_module_level_helper(self, test_config):
        session = FakeSession(respond("hi"))
        result = await acquire_transcript(" abc123 ", config=test_config, session=session)
        assert result.video_id == "abc123"
        assert session.requests[0]["params"]["v"] == "abc123"
