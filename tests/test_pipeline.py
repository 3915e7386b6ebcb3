"""
Task Orchestrator Tests.

============================================================
PURPOSE
============================================================
Run task requests through the full pipeline with a mocked fetcher.

TEST PRINCIPLES:
- Every failure exit tags hook id and stage
- No retries: the fetcher is called at most once
- Default hook selection matches naming it explicitly

============================================================
"""

import json

import pytest
from unittest.mock import AsyncMock

from sentiment import (
    DecodeError,
    FetchError,
    FetchResult,
    Hook,
    HookNotFoundError,
    HookRegistry,
    SentimentMerger,
    SentimentScorer,
    ShapeError,
    TaskOrchestrator,
    TaskRequest,
    UrlTemplate,
)


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture(scope="module")
def scorer():
    return SentimentScorer()


@pytest.fixture
def registry():
    return HookRegistry(
        [
            Hook(
                hook_id="post",
                url_template=UrlTemplate("https://remote.test/posts/{id}"),
                key="body",
                headers={"Accept": ("application/json",)},
            ),
            Hook(hook_id="raw", url_template=UrlTemplate("https://remote.test/raw/{id}.txt")),
            Hook(
                hook_id="transcript",
                url_template=UrlTemplate("https://remote.test/rec/{id}"),
                key="segments",
                time_mode=True,
            ),
        ],
        default_hook_id="post",
    )


@pytest.fixture
def fetcher():
    fetcher = AsyncMock()
    fetcher.fetch = AsyncMock()
    return fetcher


@pytest.fixture
def orchestrator(registry, fetcher, scorer):
    return TaskOrchestrator(registry, fetcher, SentimentMerger(scorer))


def respond(fetcher, body, status=200):
    fetcher.fetch.return_value = FetchResult(status_code=status, body=body, url="")


# ============================================================
# SUCCESS PATHS
# ============================================================

class TestTaskSuccess:
    """Successful task runs."""

    @pytest.mark.asyncio
    async def test_keyed_text(self, orchestrator, fetcher, scorer):
        text = "What a wonderful, happy afternoon."
        respond(fetcher, json.dumps({"id": 1, "body": text}))

        payload = await orchestrator.run(TaskRequest(record_id="1", hook_id="post"))

        assert payload == scorer.score(text).to_dict()
        fetcher.fetch.assert_awaited_once_with(
            "https://remote.test/posts/1",
            [("Accept", "application/json")],
        )

    @pytest.mark.asyncio
    async def test_plain_text_equals_scoring_raw_body(self, orchestrator, fetcher, scorer):
        body = "I am so disappointed.\nThis is awful."
        respond(fetcher, body)

        payload = await orchestrator.run(TaskRequest(record_id="abc", hook_id="raw"))

        expected = scorer.score(body)
        assert payload["score"] == expected.score
        assert len(payload["words"]) == len(expected.words)
        fetcher.fetch.assert_awaited_once_with("https://remote.test/raw/abc.txt", [])

    @pytest.mark.asyncio
    async def test_time_buckets(self, orchestrator, fetcher, scorer):
        segments = [
            {"start": 0, "end": 16.016, "text": "This is some great text!"},
            {"start": 16.016, "end": 24.014, "text": "I really hate this sentence though..."},
        ]
        respond(fetcher, json.dumps({"segments": segments}))

        payload = await orchestrator.run(TaskRequest(record_id="9", hook_id="transcript"))

        assert [(t["start"], t["end"]) for t in payload["timed"]] == [(0.0, 16.016), (16.016, 24.014)]
        assert [t["score"] for t in payload["timed"]] == [
            scorer.score(s["text"]).score for s in segments
        ]
        assert len(payload["metadata"]) == 2

    @pytest.mark.asyncio
    async def test_default_hook_matches_explicit(self, orchestrator, fetcher):
        respond(fetcher, json.dumps({"body": "Decent enough, I suppose."}))

        implicit = await orchestrator.run(TaskRequest(record_id="1"))
        explicit = await orchestrator.run(TaskRequest(record_id="1", hook_id="post"))

        assert implicit == explicit
        urls = [c.args[0] for c in fetcher.fetch.await_args_list]
        assert urls == ["https://remote.test/posts/1", "https://remote.test/posts/1"]


# ============================================================
# FAILURE EXITS
# ============================================================

class TestTaskFailures:
    """Each failure exit is tagged with hook id and stage."""

    @pytest.mark.asyncio
    async def test_unknown_hook(self, orchestrator, fetcher):
        with pytest.raises(HookNotFoundError) as exc_info:
            await orchestrator.run(TaskRequest(record_id="1", hook_id="does-not-exist"))

        assert exc_info.value.hook_id == "does-not-exist"
        assert exc_info.value.stage == "hook_not_found"
        fetcher.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_failure_not_retried(self, orchestrator, fetcher):
        fetcher.fetch.side_effect = FetchError("Remote source responded with status 503", status_code=503)

        with pytest.raises(FetchError) as exc_info:
            await orchestrator.run(TaskRequest(record_id="1", hook_id="post"))

        assert exc_info.value.hook_id == "post"
        assert exc_info.value.stage == "fetch_failed"
        assert fetcher.fetch.await_count == 1

    @pytest.mark.asyncio
    async def test_decode_failure(self, orchestrator, fetcher):
        respond(fetcher, "<html>not json</html>")

        with pytest.raises(DecodeError) as exc_info:
            await orchestrator.run(TaskRequest(record_id="1"))

        assert exc_info.value.hook_id == "post"
        assert exc_info.value.stage == "decode_failed"

    @pytest.mark.asyncio
    async def test_shape_failure(self, orchestrator, fetcher):
        respond(fetcher, json.dumps({"segments": [{"start": 0, "end": 1}]}))

        with pytest.raises(ShapeError) as exc_info:
            await orchestrator.run(TaskRequest(record_id="1", hook_id="transcript"))

        assert exc_info.value.hook_id == "transcript"
        assert exc_info.value.stage == "shape_invalid"

    @pytest.mark.asyncio
    async def test_error_dict_has_no_remote_body(self, orchestrator, fetcher):
        fetcher.fetch.side_effect = FetchError(
            "Remote source responded with status 500",
            status_code=500,
            body="Traceback (most recent call last): secret",
        )

        with pytest.raises(FetchError) as exc_info:
            await orchestrator.run(TaskRequest(record_id="1"))

        public = exc_info.value.to_dict()
        assert "secret" not in json.dumps(public)
        assert public["error"] == "FetchError"
        assert public["statusCode"] == 500
