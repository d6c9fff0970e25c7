import logging

from fastapi import FastAPI
from mangum import Mangum

from .config import settings
from .routes import events, health


def configure_logging() -> None:
    root = logging.getLogger()
    # The Lambda runtime installs its own handler on the root logger
    if not root.handlers:
        ch = logging.StreamHandler()
        formatter = logging.Formatter("[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s")
        ch.setFormatter(formatter)
        ch.setLevel(settings.log_level)
        root.addHandler(ch)
    root.setLevel(settings.log_level)


configure_logging()

app = FastAPI(
    title="Event Details API",
    description="Read-only detail lookup for disaster event records",
    version="1.0.0",
)

# Include routers
app.include_router(health.router)
app.include_router(events.router)

# Mangum handler for AWS Lambda
handler = Mangum(app)
