from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from contextlib import asynccontextmanager
from typing import Optional
import logging

from inventory_api.config import Settings, get_settings
from inventory_api.database import create_db_engine, create_session_factory
from inventory_api.errors import register_exception_handlers
from inventory_api.services.seed import init_db
from inventory_api.api import products, stats, health

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database engine belongs to the application: it is created when
    the app starts, shared by all requests through ``app.state``, and
    disposed when the app shuts down.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup and shutdown events.
        """
        # Startup
        logger.info("Starting up application...")
        engine = create_db_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        # Tables and sample data must exist before the first request
        try:
            init_db(engine, app.state.session_factory, seed=settings.SEED_SAMPLE_DATA)
        except Exception:
            logger.exception("Error initializing database")
            if settings.INIT_DB_FAIL_FAST:
                engine.dispose()
                raise
            logger.warning("Continuing without an initialized database")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        engine.dispose()

    app = FastAPI(
        title="Inventory Dashboard API",
        description="""
        Inventory management backend for a single product catalogue:

        - **Products**: create, list, fetch, replace and delete products
        - **Stats**: totals for the dashboard (products, units, categories, stock value)
        - **Dashboard**: static front end served from the site root
        """,
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(products.router, prefix="/api")
    app.include_router(stats.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    # Mounted last so /api routes take precedence
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


configure_logging(get_settings())
app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
