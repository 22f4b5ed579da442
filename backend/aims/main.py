from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aims.api import areas, auth, dashboard, locations, permissions, pools, ssc, stock, users
from aims.core.config import settings
from aims.core.logging_config import configure_logging
from aims.db.repository import DataRepository

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load every reference data document into memory
    repository = DataRepository.load(settings.DATA_DIR)
    if settings.SEED_DEFAULT_RBAC:
        repository.seed_defaults()
    app.state.repository = repository
    yield


app = FastAPI(
    title="AIMS API",
    description="Inventory administration: pools, locations, areas, stock and permissions",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS - restrict in production via env
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(permissions.router)
app.include_router(pools.router)
app.include_router(locations.router)
app.include_router(areas.router)
app.include_router(ssc.router)
app.include_router(stock.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health_check():
    return {"status": "ok", "version": "0.1.0"}
