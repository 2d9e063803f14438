from typing import Optional

from fastapi import Header, Request

from bizhub.config import get_settings
from bizhub.core.security import authenticate_request
from bizhub.database.session import get_db


def require_auth(
    request: Request,
    authorization: Optional[str] = Header(None),
):
    api_key = request.headers.get(get_settings().API_KEY_HEADER)
    return authenticate_request(
        api_key=api_key,
        authorization=authorization,
    )


__all__ = ["get_db", "require_auth"]
