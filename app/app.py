"""
FastAPI application: HTTP entry point for knowledge-discovery search.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --reload

On startup the public dataset is fetched from SCOUP_DATASET_URL; if that
fails the built-in fallback dataset is served instead (see etl/public_data.py).

Endpoints:
    POST /query                       body: {"q": "...", "types": [...], "top_k": 10}
                                      returns: {"query", "total", "results": [...]}
    GET  /dataset                     collection sizes of the active dataset
    POST /dataset/reload              re-fetch the dataset (kept as-is on failure), return sizes
    GET  /faculty/{id}/colleagues     collaborator suggestions
    GET  /faculty/{id}/projects       project opportunities

Logs each query and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import asyncio
import logging
import logging.handlers
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Literal

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

from discovery.engine import SearchEngine, filter_results
from discovery.models import confidence_label
from discovery.network import (
    ColleagueMatch,
    ProjectOpportunity,
    match_colleagues,
    match_label,
    match_projects,
)
from etl.public_data import DatasetContext, default_context

LOG_DIR  = Path(__file__).parent.parent / "logs"
LOG_FILE = LOG_DIR / "app.log"

MAX_QUERY_LENGTH = 1000


def _setup_logging() -> None:
    LOG_DIR.mkdir(exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(name)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)

_setup_logging()
log = logging.getLogger("api")


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

_context: DatasetContext = default_context
_engine = SearchEngine(_context)


@asynccontextmanager
async def lifespan(_: FastAPI):
    log.info("Loading public search dataset from %s…", _context.url)
    dataset = await _context.load()
    log.info("  Dataset ready: %s", dataset.counts())

    yield  # server runs here


app = FastAPI(title="SCOUP Knowledge Search", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------

ResultType = Literal["faculty", "paper", "patent", "project"]


class QueryRequest(BaseModel):
    q: str
    types: list[ResultType] | None = None
    top_k: int | None = Field(default=None, ge=1)


class QueryResponse(BaseModel):
    query: str
    total: int
    results: list[dict[str, Any]]


class DatasetInfo(BaseModel):
    faculty: int
    papers: int
    patents: int
    projects: int


class ColleagueOut(ColleagueMatch):
    label: str


class ProjectOut(ProjectOpportunity):
    label: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.post("/query", response_model=QueryResponse)
async def query(req: QueryRequest) -> QueryResponse:
    if not req.q.strip():
        raise HTTPException(status_code=400, detail="Query must not be empty.")
    if len(req.q) > MAX_QUERY_LENGTH:
        raise HTTPException(status_code=400, detail=f"Query longer than {MAX_QUERY_LENGTH} characters.")

    t0 = time.perf_counter()
    log.info("Searching: q=%r  types=%r", req.q, req.types)

    results = filter_results(await _engine.search(req.q), req.types)
    total = len(results)
    if req.top_k is not None:
        results = results[:req.top_k]

    payload = []
    for r in results:
        row = r.model_dump(by_alias=True)
        row["label"] = confidence_label(r.confidence)
        payload.append(row)

    elapsed = time.perf_counter() - t0
    log.info("query=%r  hits=%d  returned=%d  %.3fs", req.q, total, len(payload), elapsed)

    return QueryResponse(query=req.q, total=total, results=payload)


@app.get("/dataset", response_model=DatasetInfo)
def dataset_info() -> DatasetInfo:
    return DatasetInfo(**_context.get().counts())


@app.post("/dataset/reload", response_model=DatasetInfo)
async def reload_dataset() -> DatasetInfo:
    log.info("Reloading dataset from %s…", _context.url)
    dataset = await _context.reload()
    log.info("  Dataset ready: %s", dataset.counts())
    return DatasetInfo(**dataset.counts())


@app.get("/faculty/{faculty_id}/colleagues", response_model=list[ColleagueOut])
def colleagues(faculty_id: str) -> list[ColleagueOut]:
    try:
        matches = match_colleagues(faculty_id, _context.get())
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown faculty id {faculty_id!r}.")
    return [ColleagueOut(**m.model_dump(), label=match_label(m.match_score)) for m in matches]


@app.get("/faculty/{faculty_id}/projects", response_model=list[ProjectOut])
def project_opportunities(faculty_id: str) -> list[ProjectOut]:
    try:
        opportunities = match_projects(faculty_id, _context.get())
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown faculty id {faculty_id!r}.")
    return [ProjectOut(**o.model_dump(), label=match_label(o.relevance_score)) for o in opportunities]


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    config = uvicorn.Config(app, host="0.0.0.0", port=8000, reload=False)
    server = uvicorn.Server(config)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        uvicorn.run(app, host="0.0.0.0", port=8000, reload=False)
        return

    log.warning(
        "Detected an existing asyncio event loop; serving with create_task() instead of asyncio.run()."
    )
    asyncio.create_task(server.serve())


if __name__ == "__main__":
    log.info("=== SCOUP Knowledge Search: launching server on http://0.0.0.0:8000 ===")
    _launch_server()
