# File: /second_brain_api/services/oauth.py | Version: 1.0 | Title: Google OAuth2 client (login URL, code exchange, profile fetch)
from __future__ import annotations

import logging
from typing import Any, Dict
from urllib.parse import urlencode

import httpx

from second_brain_api.core.auth_errors import (
    OAuthCodeInvalidError,
    OAuthProfileFetchFailedError,
    OAuthTokenExchangeFailedError,
)
from second_brain_api.core.config import settings
from second_brain_api.security import create_state_token

logger = logging.getLogger(__name__)


def build_google_login_url() -> Dict[str, str]:
    state = create_state_token()
    params = {
        "client_id": settings.GOOGLE_CLIENT_ID,
        "redirect_uri": settings.GOOGLE_REDIRECT_URI,
        "response_type": "code",
        "scope": settings.GOOGLE_SCOPE,
        "access_type": "offline",
        "prompt": "consent",
        "state": state,
    }
    return {"url": f"{settings.GOOGLE_AUTH_URL}?{urlencode(params)}", "state": state}


def _json_object(resp: httpx.Response, error_cls) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError as exc:
        logger.warning("OAuth provider returned a non-JSON body")
        raise error_cls("provider response was not JSON") from exc
    if not isinstance(body, dict):
        raise error_cls("provider response was not a JSON object")
    return body


def exchange_code_for_token(code: str) -> str:
    """Trade an authorization code for a Google access token."""
    if not code:
        raise OAuthCodeInvalidError()
    data = {
        "code": code,
        "client_id": settings.GOOGLE_CLIENT_ID,
        "client_secret": settings.GOOGLE_CLIENT_SECRET,
        "redirect_uri": settings.GOOGLE_REDIRECT_URI,
        "grant_type": "authorization_code",
    }
    try:
        resp = httpx.post(
            settings.GOOGLE_TOKEN_URL, data=data, timeout=settings.OAUTH_HTTP_TIMEOUT_SECONDS
        )
    except httpx.HTTPError as exc:
        logger.warning("OAuth token exchange transport error: %s", exc.__class__.__name__)
        raise OAuthTokenExchangeFailedError() from exc

    if resp.status_code == 400:
        raise OAuthCodeInvalidError()
    if resp.status_code != 200:
        logger.warning("OAuth token exchange failed with status %s", resp.status_code)
        raise OAuthTokenExchangeFailedError()

    token = _json_object(resp, OAuthTokenExchangeFailedError).get("access_token")
    if not token:
        raise OAuthTokenExchangeFailedError("no access token returned")
    return token


def fetch_google_profile(access_token: str) -> Dict[str, Any]:
    try:
        resp = httpx.get(
            settings.GOOGLE_USERINFO_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=settings.OAUTH_HTTP_TIMEOUT_SECONDS,
        )
    except httpx.HTTPError as exc:
        logger.warning("OAuth profile fetch transport error: %s", exc.__class__.__name__)
        raise OAuthProfileFetchFailedError() from exc

    if resp.status_code != 200:
        logger.warning("OAuth profile fetch failed with status %s", resp.status_code)
        raise OAuthProfileFetchFailedError()

    profile = _json_object(resp, OAuthProfileFetchFailedError)
    if not profile.get("id") or not profile.get("email"):
        raise OAuthProfileFetchFailedError("profile is missing id or email")
    return profile
