from fastapi import FastAPI

from jdeps_runner.api.jdeps_routes import router as jdeps_router
from jdeps_runner.core.config import settings
from jdeps_runner.core.logging import setup_logging

setup_logging()

tags_metadata = [
    {
        "name": "jdeps",
        "description": "Locate the jdeps binary, preview command lines and run dependency analysis.",
    },
    {
        "name": "health",
        "description": "Liveness probe for container orchestration.",
    },
]

app = FastAPI(
    title="jdeps runner",
    version=settings.APP_VERSION,
    description="Runs the JDK `jdeps` dependency analyzer on behalf of build steps.",
    openapi_tags=tags_metadata,
)

app.include_router(jdeps_router)


@app.get("/health", tags=["health"], summary="Health check")
def health() -> dict[str, str]:
    return {"status": "healthy", "version": settings.APP_VERSION}
