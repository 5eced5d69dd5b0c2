"""FastAPI front-end for Codeforces problem queries."""
import logging
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import PlainTextResponse, Response

from ..config import Settings, get_settings
from ..filtering import ProblemQuery, run_query
from ..upstream import CodeforcesClient, Problem, UpstreamError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, client: Optional[CodeforcesClient] = None) -> FastAPI:
    """Build the app. An injected ``client`` is used as-is and left open on shutdown."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = client is None
        app.state.upstream = client or CodeforcesClient(settings)
        logger.info("Proxying problemset from %s", settings.api_base_url)
        try:
            yield
        finally:
            if owned:
                await app.state.upstream.aclose()

    app = FastAPI(
        title="Codeforces Problem Proxy",
        description="Tag-filtered, rating-sorted Codeforces problems",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s %s %.1fms", request.method, request.url.path, status, elapsed_ms)

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=500)

    @app.get("/health", response_class=PlainTextResponse)
    async def health_check() -> str:
        """Liveness only; upstream is never contacted."""
        return "ok"

    @app.get("/tags")
    async def get_tags() -> dict:
        return {"tags": list(settings.available_tags)}

    @app.get("/problems", response_model=list[Problem])
    async def problems_by_tag(request: Request, tag: str = Query("", description="Single tag")) -> list[Problem]:
        """Problems with ``tag``, possibly alongside other tags."""
        return await run_query(request.app.state.upstream, ProblemQuery.single(tag))

    @app.get("/problems/multi", response_model=list[Problem])
    async def problems_by_tags(
        request: Request, tags: str = Query("", description="Comma-separated tags")
    ) -> list[Problem]:
        """Problems with every tag in ``tags``, possibly alongside other tags."""
        return await run_query(request.app.state.upstream, ProblemQuery.multi_from_param(tags))

    @app.get("/problems/only", response_model=list[Problem])
    async def problems_by_tag_only(request: Request, tag: str = Query("", description="Single tag")) -> list[Problem]:
        """Problems carrying exactly one tag."""
        return await run_query(request.app.state.upstream, ProblemQuery.single(tag, exact=True))

    @app.get("/problems/multi/only", response_model=list[Problem])
    async def problems_by_tags_only(
        request: Request, tags: str = Query("", description="Comma-separated tags")
    ) -> list[Problem]:
        """Problems whose tag count equals the number of requested tags."""
        return await run_query(request.app.state.upstream, ProblemQuery.multi_from_param(tags, exact=True))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
