from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from canteen_api import config
from canteen_api.app_logging import configure_logging
from canteen_api.database import Base, build_engine, build_session_factory
from canteen_api.errors import register_error_handlers
from canteen_api.models import favorite, food, intake, user  # noqa: F401  (register tables)
from canteen_api.routes import auth, favorites, intake as intake_routes
from canteen_api.routes import food as food_routes
from canteen_api.seed import bootstrap


def create_app(database_url: Optional[str] = None, seed_demo: Optional[bool] = None) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    engine = build_engine(database_url or config.database_url())
    session_factory = build_session_factory(engine)
    seed_foods = config.seed_demo_data() if seed_demo is None else seed_demo

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        bootstrap(session_factory, seed_foods=seed_foods)
        yield
        engine.dispose()

    app = FastAPI(
        title="Canteen Calorie Tracker API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allow_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(food_routes.router)
    app.include_router(intake_routes.router)
    app.include_router(favorites.router)

    @app.get("/")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
