import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.dialogflow import router as dialogflow_router
from app.api.health import router as health_router
from app.core.errors import register_error_handlers
from app.core.logging_cfg import configure_logging
from app.settings import settings

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Dialogflow Chatbot")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(health_router)
app.include_router(dialogflow_router)

register_error_handlers(app)

logger.info("Dialogflow chatbot app created")
