from fastapi import HTTPException, status

from bizhub.core.errors import BizhubError, ConflictError, NotFoundError, ValidationError

_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
)


def http_error(exc: BizhubError) -> HTTPException:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


RPC_PREFIX = "/rpc"


def operation_name(path: str):
    """``/rpc/createTask`` -> ``createTask``; None for non-RPC paths."""
    prefix = RPC_PREFIX + "/"
    if not path.startswith(prefix):
        return None
    return path[len(prefix):] or None
