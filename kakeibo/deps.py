# kakeibo/deps.py
# Role: Shared application-level dependencies and globals.
#       Provides the Jinja2 templates loader (with currency filter and CSRF helper),
#       flash-message helpers, and the standard SQLAlchemy database session dependency.

"""
Shared dependencies and globals for the finance tracker app.
"""

import os
from typing import Any, Dict, Generator, List

from fastapi import Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

import config
from db import SessionLocal
from kakeibo.services.csrf import generate_csrf_token, validate_csrf_token

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# -------------------------------------------------------------------
# Templates
# -------------------------------------------------------------------

# Jinja2 templates loader (used by all HTML-rendering routes)
templates = Jinja2Templates(directory=os.path.join(PACKAGE_DIR, "templates"))


def format_currency(amount: Any) -> str:
    """
    'Rp 1.234.567' - absolute value, no decimals, '.' as thousands separator.
    """
    value = abs(float(amount or 0))
    return config.CURRENCY_PREFIX + f"{value:,.0f}".replace(",", ".")


templates.env.filters["currency"] = format_currency
templates.env.globals["APP_NAME"] = config.APP_NAME
templates.env.globals["CATEGORY_COLORS"] = config.CATEGORY_COLORS
templates.env.globals["FALLBACK_COLOR"] = config.FALLBACK_COLOR

# -------------------------------------------------------------------
# Flash messages (post/redirect/get)
# -------------------------------------------------------------------

FLASH_KEY = "flash"
INVALID_CSRF_MESSAGE = "Invalid security token. Please try again."


def flash(request: Request, text: str, level: str = "message") -> None:
    """
    Queue a message for the next rendered page. level: "message" or "error".
    """
    messages: List[Dict[str, str]] = request.session.get(FLASH_KEY, [])
    messages.append({"level": level, "text": text})
    request.session[FLASH_KEY] = messages


def pop_flashes(request: Request) -> List[Dict[str, str]]:
    return request.session.pop(FLASH_KEY, [])


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def render(request: Request, template: str, context: Dict[str, Any]) -> HTMLResponse:
    """
    TemplateResponse with the CSRF token and pending flash messages injected.
    """
    payload = {
        "request": request,
        "csrf_token": generate_csrf_token(request),
        "flashes": pop_flashes(request),
    }
    payload.update(context)
    return templates.TemplateResponse(request, template, payload)


def csrf_ok(request: Request, form: Any) -> bool:
    """
    Check the submitted csrf_token; on failure queue the standard error message.
    """
    if validate_csrf_token(request, form.get("csrf_token")):
        return True
    flash(request, INVALID_CSRF_MESSAGE, "error")
    return False


# -------------------------------------------------------------------
# Database dependency
# -------------------------------------------------------------------

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
