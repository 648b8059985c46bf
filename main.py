# main.py
# Role: Application entry point for the finance tracker.
#       Configures logging, initializes the database, adds the session
#       middleware, mounts static assets, and registers all route modules.

"""
Main FastAPI app for the Kakeibo personal finance tracker.

Here we only:
- configure logging
- create DB tables and seed default categories
- create the FastAPI app (+ signed session cookie for CSRF / flash messages)
- set up static files
- include route modules

Run with:
    uvicorn main:app --reload
"""

import logging
import os

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

import config
from db import init_db
from kakeibo.routes_root import router as root_router
from kakeibo.routes_dashboard import router as dashboard_router
from kakeibo.routes_transactions import router as transactions_router
from kakeibo.routes_charts import router as charts_router


# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

# Create database tables (only if they don't exist yet) and seed categories.
init_db()

# FastAPI application instance
app = FastAPI(title=config.APP_NAME)

# Signed cookie session: holds the CSRF token and pending flash messages
app.add_middleware(SessionMiddleware, secret_key=config.SECRET_KEY, same_site="strict")

# Serve static files (CSS/JS) from /static
static_dir = os.path.join(config.BASE_DIR, "kakeibo", "static")
app.mount("/static", StaticFiles(directory=static_dir), name="static")

# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Root / landing routes
app.include_router(root_router)

# Dashboard (summary cards, charts, filters, transaction table)
app.include_router(dashboard_router)

# Transaction CRUD + CSV export
app.include_router(transactions_router)

# Standalone SVG charts
app.include_router(charts_router)

logger.info("%s ready (database: %s)", config.APP_NAME, config.DATABASE_URL)
