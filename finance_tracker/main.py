"""
Finance Tracker: FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from finance_tracker.config import get_settings
from finance_tracker.logging_config import setup_logging
from finance_tracker.api.health import router as health_router
from finance_tracker.api.users import router as users_router
from finance_tracker.api.entries import router as entries_router

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Personal finance tracker: incomes, expenses and balances",
    debug=settings.DEBUG,
)

# Register routers
app.include_router(health_router)
app.include_router(users_router)
app.include_router(entries_router)
