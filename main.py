import logging

from aham.entries import routes as entries_router
from aham.targets import routes as targets_router
from aham.tasks import routes as tasks_router
from aham.routines import routes as routines_router
from aham.analysis import routes as analysis_router
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from aham.core.config import CORS_ORIGINS, LOG_LEVEL
from aham.core.database import init_db

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Aham API",
    version="1.0.0",
    description="Backend for Aham — daily journal, targets, routines and AI reflections.",
)

# CORS config
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials="*" not in CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(entries_router.router)
app.include_router(targets_router.router)
app.include_router(tasks_router.router)
app.include_router(routines_router.router)
app.include_router(analysis_router.router)


# DB Tables
@app.on_event("startup")
def create_tables():
    init_db()
