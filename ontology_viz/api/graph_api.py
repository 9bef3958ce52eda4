from __future__ import annotations

import logging
import time
from typing import Dict, Optional

from fastapi import Depends, FastAPI, File, Query, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from ontology_viz.api import service
from ontology_viz.api.models import (
    ErrorResponse,
    GraphResponse,
    NodeDetailsResponse,
    StatisticsResponse,
)
from ontology_viz.config.settings import Settings, get_settings
from ontology_viz.errors import InvalidArgumentError, OntologyVizError

logger = logging.getLogger("ontology_viz.web")
logging.basicConfig(level=get_settings().log_level)

app = FastAPI(
    title="Ontology Visualizer API",
    description="Turn RDF ontologies into bounded, renderable graphs.",
    version="0.1.0",
)

# -------------------------------------------------------------------
# CORS – development frontends by default, see Settings.cors_origins
# -------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}}


# -------------------------------------------------------------------
# Middleware / error mapping
# -------------------------------------------------------------------


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log method, path, status and duration of every request.
    """
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info(
        "%s %s -> %d in %.2fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


@app.exception_handler(OntologyVizError)
async def ontology_error_handler(request: Request, exc: OntologyVizError) -> JSONResponse:
    """
    Parse errors, unsupported formats and invalid arguments are all caller
    problems (400); the `error` code keeps them distinguishable.
    """
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(detail=str(exc), error=exc.code).model_dump(),
    )


def _effective_max_nodes(max_nodes: Optional[int], settings: Settings) -> int:
    return settings.max_nodes_default if max_nodes is None else max_nodes


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------


@app.get("/health", summary="Health check")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post(
    "/api/ontology/parse",
    response_model=GraphResponse,
    responses=_ERROR_RESPONSES,
    summary="Parse ontology text into a graph capped at maxNodes nodes",
)
async def parse_ontology(
    request: Request,
    fmt: Optional[str] = Query(None, alias="format"),
    max_nodes: Optional[int] = Query(None, alias="maxNodes"),
    settings: Settings = Depends(get_settings),
) -> GraphResponse:
    """
    The request body is the raw ontology text. Graphs larger than maxNodes
    (default: settings.max_nodes_default) are reduced to the induced
    subgraph on their highest-degree nodes.
    """
    content = await request.body()
    graph = await run_in_threadpool(
        service.parse_ontology,
        content,
        fmt,
        _effective_max_nodes(max_nodes, settings),
        settings,
    )
    return GraphResponse.from_graph(graph)


@app.post(
    "/api/ontology/upload",
    response_model=GraphResponse,
    responses=_ERROR_RESPONSES,
    summary="Upload an ontology file and return its (capped) graph",
)
async def upload_ontology(
    file: UploadFile = File(..., description="Ontology file to visualize"),
    fmt: Optional[str] = Query(None, alias="format"),
    max_nodes: Optional[int] = Query(None, alias="maxNodes"),
    settings: Settings = Depends(get_settings),
) -> GraphResponse:
    content = await file.read()
    if not content:
        raise InvalidArgumentError("Please select a file to upload")

    graph = await run_in_threadpool(
        service.parse_ontology,
        content,
        fmt,
        _effective_max_nodes(max_nodes, settings),
        settings,
    )
    return GraphResponse.from_graph(graph)


@app.post(
    "/api/ontology/node-details",
    response_model=NodeDetailsResponse,
    responses=_ERROR_RESPONSES,
    summary="Incoming and outgoing connections of a single node",
)
async def get_node_details(
    request: Request,
    node_id: str = Query(..., alias="nodeId"),
    fmt: Optional[str] = Query(None, alias="format"),
    settings: Settings = Depends(get_settings),
) -> NodeDetailsResponse:
    """
    The request body is the ontology the node belongs to. Unknown nodes
    return empty connection lists rather than 404.
    """
    content = await request.body()
    hood = await run_in_threadpool(service.node_details, content, fmt, node_id, settings)
    return NodeDetailsResponse.from_neighborhood(hood)


@app.post(
    "/api/ontology/statistics",
    response_model=StatisticsResponse,
    responses=_ERROR_RESPONSES,
    summary="Node, edge, triple and relation-label counts",
)
async def get_statistics(
    request: Request,
    fmt: Optional[str] = Query(None, alias="format"),
    settings: Settings = Depends(get_settings),
) -> StatisticsResponse:
    content = await request.body()
    stats = await run_in_threadpool(service.ontology_statistics, content, fmt, settings)
    return StatisticsResponse.from_statistics(stats)
