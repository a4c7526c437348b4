"""Main FastMCP server — mounts the analysis and infra sub-servers."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from . import tracing
from .activity import drain_pending
from .client import GeminiClient
from .tools.analysis import analysis_server
from .tools.infra import infra_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    """Startup/shutdown hook — flushes notifications and closes Gemini clients."""
    tracing.setup()
    yield {}
    pending = await drain_pending()
    closed = await GeminiClient.close_all()
    tracing.shutdown()
    logger.info("Lifespan shutdown: %d pending notification(s), closed %d client(s)", pending, closed)


app = FastMCP(
    "drawing-analysis",
    instructions=(
        "Child drawing analysis — free drawings and projective instruments "
        "(DAP, HTP, Family, Tree, ...) returned as localized, non-diagnostic "
        "observation reports. Powered by Gemini."
    ),
    lifespan=_lifespan,
)

app.mount(analysis_server)
app.mount(infra_server)


def main() -> None:
    """Entry-point for ``drawing-analysis-mcp`` console script."""
    app.run()


if __name__ == "__main__":
    main()
