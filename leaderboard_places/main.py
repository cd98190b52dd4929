from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from .config import service
from .core.events import startup_event, shutdown_event
from .logger import configure_logging
from .routes import health, places

# Configure logging
configure_logging(service.log_level)

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    yield
    await shutdown_event()

app = FastAPI(
    default_response_class=ORJSONResponse,
    title=service.title,
    description="Leaderboard place calculation with minimum scores for the top three places",
    version=service.version,
    lifespan=lifespan
)

app.include_router(places.router)
app.include_router(health.router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "leaderboard_places.main:app",
        host=service.host,
        port=service.port,
        workers=service.workers,
        log_level=service.log_level.lower()
    )
