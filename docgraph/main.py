import logging
import logging.config

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from docgraph.config import Settings
from docgraph.limiter import limiter
from docgraph.routers.graph import router as graph_router
from docgraph.routers.pages import router as pages_router
from docgraph.routers.sitemap import router as sitemap_router
from docgraph.services.repository import PageRepository, get_repository, load_manifest

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(
    title="docgraph – Documentation Relationship API",
    description="Builds the page graph, related-page recommendations, navigation and sitemap for a docs site.",
    version="1.0.0",
)

app.state.repository = load_manifest(settings.manifest)
app.state.site_url = settings.site_url

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(graph_router)
app.include_router(pages_router)
app.include_router(sitemap_router)


@app.get("/", summary="Health check")
async def root(repository: PageRepository = Depends(get_repository)) -> dict:
    return {"message": "Hello from docgraph", "pages": len(repository.get_pages())}
