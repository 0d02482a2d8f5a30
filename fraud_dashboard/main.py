import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError

from fraud_dashboard.config import Settings, get_settings
from fraud_dashboard.core.constants import DEFAULT_DASHBOARD_PATH, TEMPLATES_DIR
from fraud_dashboard.core.logging import setup_logging
from fraud_dashboard.database import check_connection, engine, ensure_schema
from fraud_dashboard.routers import (
    dashboard_api_router,
    health_router,
    pages_router,
    readings_api_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    try:
        ensure_schema()
    except SQLAlchemyError:
        logger.exception("Could not create service tables; continuing without them.")
    if check_connection():
        logger.info(
            "Connected to database: %s",
            engine.url.render_as_string(hide_password=True),
        )
    logger.info("Dashboard API: %s/dashboard", settings.API_PREFIX)
    logger.info("Critical cases: %s/critical-cases", settings.API_PREFIX)
    logger.info("Recent readings: %s/recent-readings", settings.API_PREFIX)
    yield
    logger.info("Fraud dashboard shutting down.")


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(dashboard_api_router, prefix=settings.API_PREFIX)
app.include_router(readings_api_router, prefix=settings.API_PREFIX)
app.include_router(pages_router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # API callers branch on the payload, never on the status code.
    if not request.url.path.startswith(settings.API_PREFIX):
        return await request_validation_exception_handler(request, exc)
    problems = []
    for item in exc.errors():
        location = ".".join(str(part) for part in item.get("loc", ())[1:])
        problems.append("{}: {}".format(location or "body", item.get("msg")))
    return JSONResponse({"success": False, "error": "; ".join(problems) or "Invalid request"})


@app.get("/")
def root():
    return RedirectResponse(url=DEFAULT_DASHBOARD_PATH, status_code=302)


def run():
    logger.info("Fraud dashboard backend on http://localhost:%d", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()


__all__ = ["app", "root", "run"]
