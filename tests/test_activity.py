"""Tests for the post-completion activity notification."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from drawing_analysis_mcp import activity
from drawing_analysis_mcp.activity import HttpActivityRecorder, build_recorder, schedule_activity
from drawing_analysis_mcp.config import ServerConfig


class TestHttpActivityRecorder:
    async def test_posts_payload_with_bearer_token(self):
        response = MagicMock()
        http_client = MagicMock()
        http_client.post = AsyncMock(return_value=response)
        http_client.__aenter__ = AsyncMock(return_value=http_client)
        http_client.__aexit__ = AsyncMock(return_value=False)

        with patch("drawing_analysis_mcp.activity.httpx.AsyncClient", return_value=http_client) as ctor:
            recorder = HttpActivityRecorder("https://badges.example/activity", api_key="secret", timeout=3)
            await recorder.record("user-9", "analysis", {"taskType": "DAP"})

        ctor.assert_called_once_with(timeout=3)
        http_client.post.assert_awaited_once_with(
            "https://badges.example/activity",
            json={"userId": "user-9", "activityType": "analysis", "metadata": {"taskType": "DAP"}},
            headers={"Authorization": "Bearer secret"},
        )
        response.raise_for_status.assert_called_once()

    async def test_http_error_propagates_from_record(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, request=request)

        transport = httpx.MockTransport(handler)
        real_client = httpx.AsyncClient

        def _client(**kwargs):
            return real_client(transport=transport, **kwargs)

        with patch("drawing_analysis_mcp.activity.httpx.AsyncClient", side_effect=_client):
            with pytest.raises(httpx.HTTPStatusError):
                await HttpActivityRecorder("https://badges.example/activity").record("u", "analysis", {})


class TestBuildRecorder:
    def test_none_without_url(self):
        assert build_recorder(ServerConfig(activity_url="")) is None

    def test_http_recorder_from_config(self):
        recorder = build_recorder(ServerConfig(
            activity_url="https://badges.example/a", activity_api_key="k", activity_timeout_seconds=4,
        ))
        assert isinstance(recorder, HttpActivityRecorder)
        assert (recorder.url, recorder.api_key, recorder.timeout) == ("https://badges.example/a", "k", 4)


class TestScheduleActivity:
    async def test_failure_is_logged_not_raised(self, caplog):
        recorder = MagicMock()
        recorder.record = AsyncMock(side_effect=ConnectionError("refused"))
        with caplog.at_level(logging.WARNING, logger="drawing_analysis_mcp.activity"):
            task = schedule_activity(recorder, "u1")
            await task
        assert task.exception() is None
        assert "non-fatal" in caplog.text
        recorder.record.assert_awaited_once_with("u1", "analysis", {})

    async def test_pending_tasks_are_tracked_until_done(self):
        gate = asyncio.Event()

        class SlowRecorder:
            async def record(self, user_id, activity_type, metadata):
                await gate.wait()

        task = schedule_activity(SlowRecorder(), "u2", metadata={"x": 1})
        assert task in activity._pending
        gate.set()
        await task
        await asyncio.sleep(0)
        assert task not in activity._pending

    async def test_drain_pending_waits(self):
        done = []

        class Recorder:
            async def record(self, user_id, activity_type, metadata):
                await asyncio.sleep(0.01)
                done.append(user_id)

        schedule_activity(Recorder(), "u3")
        assert await activity.drain_pending(timeout=1) == 1
        assert done == ["u3"]
