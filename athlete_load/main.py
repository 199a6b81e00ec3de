from fastapi import FastAPI
from loguru import logger

from athlete_load.api.training_load import router as training_load_router
from athlete_load.config.settings import settings
from athlete_load.core.logger import setup_logger
from athlete_load.db.models import Base
from athlete_load.db.session import get_engine

# Initialize logger
setup_logger(level=settings.log_level, log_file=settings.log_file)

# Ensure database tables exist
logger.info("Ensuring database tables exist")
Base.metadata.create_all(bind=get_engine())
logger.info("Database tables verified")

app = FastAPI(title="Athlete Load")

app.include_router(training_load_router)


@app.get("/health")
def health():
    return {"status": "ok"}
