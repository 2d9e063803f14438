from __future__ import annotations

import hmac
from typing import Optional

import jwt
from fastapi import HTTPException, status

from bizhub.config import get_settings


def _load_api_keys() -> set[str]:
    settings = get_settings()
    keys = set()
    if settings.API_KEYS:
        for value in settings.API_KEYS.split(","):
            value = value.strip()
            if value:
                keys.add(value)
    return keys


def _matches_api_key(candidate: Optional[str], keys: set[str]) -> bool:
    if not candidate:
        return False
    candidate = candidate.strip()
    return any(hmac.compare_digest(candidate, key) for key in keys)


def _get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _decode_jwt(token: str) -> dict:
    settings = get_settings()
    if not settings.JWT_SECRET:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="JWT auth is not configured",
        )

    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=options,
        )
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid JWT",
        ) from exc


def auth_configured() -> bool:
    settings = get_settings()
    return bool(_load_api_keys() or settings.JWT_SECRET or settings.JWT_REQUIRED)


def authenticate_request(
    api_key: Optional[str],
    authorization: Optional[str],
) -> Optional[dict]:
    """Resolve the caller from an API key or bearer token.

    Returns ``None`` when no credentials are configured at all, so a local
    instance stays usable without setup.
    """
    settings = get_settings()
    keys = _load_api_keys()

    if not settings.JWT_REQUIRED and _matches_api_key(api_key, keys):
        return {"auth_type": "api_key"}

    token = _get_bearer_token(authorization)
    if token and settings.JWT_SECRET:
        return {"auth_type": "jwt", "payload": _decode_jwt(token)}

    if auth_configured():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return None
