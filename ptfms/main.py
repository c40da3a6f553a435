import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ptfms.config import settings
from ptfms.database import async_session, create_tables
from ptfms.routers.alerts import router as alerts_router
from ptfms.routers.commands import router as commands_router
from ptfms.routers.components import router as components_router
from ptfms.routers.fuel_logs import router as fuel_logs_router
from ptfms.routers.gps import router as gps_router
from ptfms.routers.maintenance import router as maintenance_router
from ptfms.routers.reports import router as reports_router
from ptfms.routers.users import router as users_router
from ptfms.routers.vehicles import router as vehicles_router
from ptfms.seed import seed_data
from ptfms.utils.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    async with async_session() as session:
        await seed_data(session)
    yield


app = FastAPI(
    title="PTFMS API",
    description="Public transportation fleet management backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(vehicles_router, prefix="/api/v1")
app.include_router(maintenance_router, prefix="/api/v1")
app.include_router(fuel_logs_router, prefix="/api/v1")
app.include_router(alerts_router, prefix="/api/v1")
app.include_router(gps_router, prefix="/api/v1")
app.include_router(components_router, prefix="/api/v1")
app.include_router(reports_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(commands_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "success", "data": {"service": "ptfms-api", "version": "0.1.0"}, "message": None}
