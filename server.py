"""FastAPI backend for depth-first graph traversal."""

import logging
from typing import Any, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import ServerConfig
from models.graph import Node, TraversalResult
from parsers.graph_parser import parse_input, coerce_node
from traversal.graph import build_graph

config = ServerConfig.from_env()

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)


# Request Models

class TraverseRequest(BaseModel):
    graph: Union[dict[str, Any], str]
    start: Optional[Node] = None


# FastAPI app

app = FastAPI(
    title="Graph Traversal Service",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/traverse", response_model=TraversalResult)
async def traverse(request: TraverseRequest) -> TraversalResult:
    """Traverse the submitted graph depth-first."""
    try:
        normalized = parse_input(request.graph)
        start = coerce_node(request.start) if request.start is not None else normalized.start
    except ValueError as e:
        logger.warning("Rejected graph input: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    if start is None:
        raise HTTPException(status_code=400, detail="Graph is empty and no start node was given")

    graph = build_graph(normalized)
    order = graph.traverse(start)
    logger.debug("Traversed %d of %d nodes from %r", len(order), len(graph), start)

    return TraversalResult(
        start=start,
        order=order,
        visited_count=len(order),
        node_count=graph.count_with(start),
    )


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """Health check."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)
