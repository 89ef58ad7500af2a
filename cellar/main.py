from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse

from .config import settings
from .models import FilterUpdate, HealthResponse, PairingsResponse, ViewResponse
from .session import CatalogSession
from .view import filter_pairings

INDEX_HTML = Path(__file__).parent / "static" / "index.html"


def create_app(source=None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        session = CatalogSession(shared_expand_keys=settings.shared_expand_keys)
        await run_in_threadpool(
            session.load, source or settings.source, settings.request_timeout
        )
        app.state.session = session
        yield

    app = FastAPI(
        title="wine-cellar",
        description="Filterable, grouped wine list loaded from a CSV export",
        version="0.1.0",
        lifespan=lifespan,
    )

    def _session(request: Request) -> CatalogSession:
        session = request.app.state.session
        if session.error is not None:
            raise HTTPException(status_code=503, detail=session.error.message)
        return session

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"ok": True}

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(INDEX_HTML, media_type="text/html")

    # Session handlers are async with no awaits: they run one at a time on the
    # event loop and never interleave their updates to the session state.
    @app.get("/api/view", response_model=ViewResponse)
    async def get_view(request: Request):
        return _session(request).view()

    @app.put("/api/filters", response_model=ViewResponse)
    async def put_filters(update: FilterUpdate, request: Request):
        return _session(request).update_filters(update)

    @app.post("/api/groups/{category}/{varietal:path}/toggle", response_model=ViewResponse)
    async def toggle_group(category: str, varietal: str, request: Request):
        session = _session(request)
        try:
            return session.toggle(category, varietal)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.get("/api/pairings", response_model=PairingsResponse)
    def pairings(q: str = ""):
        return {"pairings": filter_pairings(q)}

    return app


app = create_app()
