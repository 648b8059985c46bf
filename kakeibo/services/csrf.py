# kakeibo/services/csrf.py
"""
Session-backed CSRF tokens.

One random token per session (stored in request.session by Starlette's
SessionMiddleware). Every POST form carries it in a hidden `csrf_token` field.
"""

import secrets
from typing import Optional

from fastapi import Request

SESSION_KEY = "csrf_token"


def generate_csrf_token(request: Request) -> str:
    token = request.session.get(SESSION_KEY)
    if not token:
        token = secrets.token_hex(32)
        request.session[SESSION_KEY] = token
    return token


def validate_csrf_token(request: Request, token: Optional[str]) -> bool:
    expected = request.session.get(SESSION_KEY)
    if not expected or not token:
        return False
    return secrets.compare_digest(str(expected), str(token))
