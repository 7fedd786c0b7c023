"""
Crosswords API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from crosswords.core.config import get_settings
from crosswords.core.errors import CrosswordsError
from crosswords.core.loader import load_wordnet_json
from crosswords.core.log import configure_logging
from crosswords.server import deps
from crosswords.server.routes import synsets, words

logger = logging.getLogger(__name__)


def log_routes(app: FastAPI):
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        logger.info("  %-8s %-40s → %s", methods, path, name)


def load_graph(data_path: str) -> None:
    """Load and validate the dataset, leaving the gate closed on failure."""
    try:
        graph = load_wordnet_json(data_path)
        deps.set_graph(graph)
    except CrosswordsError as e:
        logger.error("Word graph not loaded, searches will be refused: %s", e)
        return
    logger.info("Word graph ready: %s", graph.stats())


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    log_routes(app)
    if not deps.is_ready():
        load_graph(settings.data_path)
    yield


app = FastAPI(
    title="Crosswords API",
    description="Search for related words, for example for filling out crosswords. Based on the WordNet dataset.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(words.router)
app.include_router(synsets.router)


@app.get("/")
async def root():
    return {"name": "Crosswords API", "version": "0.1.0"}


@app.get("/health")
async def health():
    if not deps.is_ready():
        return {"ready": False}
    return {"ready": True, **deps.get_graph().stats()}
