import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.events import router as events_router
from app.api.ledger import router as ledger_router
from app.db import Base, engine
from app.models.piano_session import PianoSession  # noqa: F401  (import ensures table is registered)
from app.models.transaction import Transaction  # noqa: F401
from app.models.weekly_award import WeeklyAward  # noqa: F401
from app.models.test_record import TestRecord  # noqa: F401
from app.models.incident import Incident  # noqa: F401
from app.core.config import settings
from app.core.logging_config import configure_logging


configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

# The UI is served separately, allow any origin
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables on startup (alembic handles managed deployments)
Base.metadata.create_all(bind=engine)
logger.info("Database tables initialized")

app.include_router(events_router)
app.include_router(ledger_router)


@app.get("/")
def root():
    return {"message": f"{settings.app_name} backend is running"}


@app.get("/health")
def health():
    return {"status": "ok"}
