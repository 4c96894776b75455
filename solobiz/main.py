from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solobiz.core.config import settings
from solobiz.core.logging_config import setup_logging
from solobiz.db.base import Base
from solobiz.db.session import engine

# Importing the route modules registers every model on Base.metadata
from solobiz.api.routes import (
    analytics,
    assistant,
    clients,
    reminders,
    services,
)

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.API_VERSION, lifespan=lifespan)

# ===============================
# CORS CONFIGURATION
# ===============================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===============================
# INCLUDE ROUTERS
# ===============================
app.include_router(analytics.router)
app.include_router(clients.router)
app.include_router(services.router)
app.include_router(reminders.router)
app.include_router(assistant.router)


# ===============================
# ROOT ENDPOINT
# ===============================
@app.get("/")
def root():
    return {"status": "Backend running successfully"}
