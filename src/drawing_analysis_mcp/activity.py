"""Post-completion activity notification (badge / achievement service).

Notifications are fire-and-forget: they run as background tasks after the
result is ready, and failures log a warning but never reach the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import httpx

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)

ANALYSIS_ACTIVITY = "analysis"

# Strong references so pending tasks are not garbage-collected mid-flight.
_pending: set[asyncio.Task] = set()


class ActivityRecorder(Protocol):
    """Downstream collaborator that records a completed user activity."""

    async def record(self, user_id: str, activity_type: str, metadata: dict[str, Any]) -> None: ...


class HttpActivityRecorder:
    """POSTs ``{userId, activityType, metadata}`` to an HTTP endpoint."""

    def __init__(self, url: str, *, api_key: str = "", timeout: float = 10.0) -> None:
        self.url = url
        self.api_key = api_key
        self.timeout = timeout

    async def record(self, user_id: str, activity_type: str, metadata: dict[str, Any]) -> None:
        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                self.url,
                json={"userId": user_id, "activityType": activity_type, "metadata": metadata},
                headers=headers,
            )
            response.raise_for_status()


def build_recorder(cfg: ServerConfig | None = None) -> ActivityRecorder | None:
    """HTTP recorder when ``DRAWING_ACTIVITY_URL`` is set, else None."""
    cfg = cfg or get_config()
    if not cfg.activity_url:
        return None
    return HttpActivityRecorder(
        cfg.activity_url,
        api_key=cfg.activity_api_key,
        timeout=cfg.activity_timeout_seconds,
    )


async def _record_safely(
    recorder: ActivityRecorder, user_id: str, activity_type: str, metadata: dict[str, Any]
) -> None:
    try:
        await recorder.record(user_id, activity_type, metadata)
    except Exception as exc:
        logger.warning("Activity notification failed (non-fatal): %s", exc)
    else:
        logger.debug("Recorded %s activity for user %s", activity_type, user_id)


def schedule_activity(
    recorder: ActivityRecorder,
    user_id: str,
    *,
    activity_type: str = ANALYSIS_ACTIVITY,
    metadata: dict[str, Any] | None = None,
) -> asyncio.Task:
    """Start the notification in the background and return its task."""
    task = asyncio.create_task(
        _record_safely(recorder, user_id, activity_type, metadata or {}),
        name=f"activity-{activity_type}",
    )
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task


async def drain_pending(timeout: float = 5.0) -> int:
    """Wait briefly for in-flight notifications (used at shutdown).

    Returns:
        Number of tasks that were still pending.
    """
    tasks = list(_pending)
    if tasks:
        await asyncio.wait(tasks, timeout=timeout)
    return len(tasks)
