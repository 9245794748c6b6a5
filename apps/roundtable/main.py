import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Environment is loaded by Pydantic Settings (see roundtable.core.settings).
from roundtable.api import register_routes
from roundtable.core.exceptions import register_exception_handlers
from roundtable.core.logging import setup_logging
from roundtable.core.settings import settings

# Initialize logging early so all modules inherit the handlers/level
setup_logging(settings.effective_log_level)

app = FastAPI(title="Roundtable API", debug=settings.debug)
register_exception_handlers(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app)

logger = logging.getLogger(__name__)
logger.info("Roundtable API initialized (env=%s, data_dir=%s)", settings.app_env, settings.data_dir)
