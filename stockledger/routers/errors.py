from fastapi import HTTPException, status

from ..core.errors import ApiError, InsufficientInventoryError


def http_error(e: ApiError) -> HTTPException:
    """Map a domain/remote error to the HTTP error the view layer sees."""
    # status 0 = timeout/connection failure upstream
    code = e.status if e.status and e.status >= 400 else status.HTTP_502_BAD_GATEWAY
    if isinstance(e, InsufficientInventoryError):
        return HTTPException(
            status_code=code,
            detail={"message": e.message, "available": str(e.available), "requested": str(e.requested)},
        )
    return HTTPException(status_code=code, detail=e.message)
