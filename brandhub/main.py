from fastapi import FastAPI
from contextlib import asynccontextmanager
import uvicorn
import logging
import sys

from .config import AppSettings

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings):
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, mode='a', encoding='utf-8'))
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- STARTUP ---
    from .core.container import init_container, reset_container

    settings = AppSettings()
    configure_logging(settings)
    container = init_container(settings)

    # Load the Domain Store once, before the first request
    brand_service = container.brand_service()
    container.settings_service()
    logger.info(f"[STARTUP] Brand store ready with {len(brand_service.list_brands())} brands")

    yield

    # --- SHUTDOWN ---
    reset_container()
    logger.info("[OK] Shutdown complete.")


app = FastAPI(title="Brand Hub", lifespan=lifespan)

# ========== Include API Routers ==========
from .api.routers import brands, resources, settings, system

app.include_router(brands.router, prefix="/api")
app.include_router(resources.router, prefix="/api")
app.include_router(settings.router, prefix="/api")
app.include_router(system.router, prefix="/api")

if __name__ == "__main__":
    uvicorn.run("brandhub.main:app", host="127.0.0.1", port=8000, reload=True)
