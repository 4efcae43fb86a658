from contextlib import asynccontextmanager
from fastapi import FastAPI

from .catalog import Catalog
from .routers.read import router as read_router
from .routers.search import router as search_router
from app.setup_logging import setup_logging
from app.settings import CATALOG_DATA_PATH
from app.store import load_catalog
import logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context runs once at startup and once at shutdown.
    The catalog is normalized here, once, and every request reads
    the same immutable collection afterwards.
    """
    app.state.load_error = None
    try:
        app.state.catalog = load_catalog(CATALOG_DATA_PATH)
    except FileNotFoundError as e:
        # Serve an empty catalog so /healthz can report the problem
        log.error("catalog data not found: %s", CATALOG_DATA_PATH)
        app.state.load_error = str(e)
        app.state.catalog = Catalog([])

    yield
    # No special shutdown logic needed

# Create the FastAPI app instance
app = FastAPI(title="Metadata Catalog", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - records: size of the loaded catalog
      - load_error: data loading error message (None if healthy)
    """
    catalog = getattr(app.state, "catalog", None)
    return {
        "ok": True,
        "service": "catalog",
        "version": 1,
        "records": catalog.total if catalog is not None else 0,
        "data_path": str(CATALOG_DATA_PATH),
        "load_error": getattr(app.state, "load_error", None),
    }

# Register API routers:
app.include_router(read_router)
app.include_router(search_router)
