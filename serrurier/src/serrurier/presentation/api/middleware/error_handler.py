"""
Global error handling middleware.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException as StarletteHTTPException

from serrurier.domain.exceptions import SerrurierException
from serrurier.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)

STATUS_CODE_MAP = {
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
    "INVALID_SIGNATURE": status.HTTP_401_UNAUTHORIZED,
    "NOT_AUTHENTICATED": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_UNAVAILABLE": status.HTTP_403_FORBIDDEN,
    "WALLET_CONFLICT": status.HTTP_403_FORBIDDEN,
    "STORE_UNAVAILABLE": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "MISCONFIGURED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def serrurier_exception_handler(
    request: Request, exc: SerrurierException
) -> JSONResponse:
    """
    Handle Serrurier domain exceptions.

    Converts domain exceptions to appropriate HTTP responses.
    """
    status_code = STATUS_CODE_MAP.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )

    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} refused: {exc.code}")

    # Internal details of server errors stay in the logs
    message = exc.message
    if exc.code == "STORE_UNAVAILABLE":
        message = "Identity service unavailable"

    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": message,
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies (invalid JSON, missing fields)."""
    errors = exc.errors()

    if any(error.get("type") == "json_invalid" for error in errors):
        message = "Invalid JSON in request body"
    else:
        fields = sorted(
            {
                str(error["loc"][-1])
                for error in errors
                if len(error.get("loc", ())) > 1 and error["loc"][0] == "body"
            }
        )
        if fields:
            message = f"Missing or invalid fields: {', '.join(fields)}"
        else:
            message = "Request body must be a JSON object"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "INVALID_INPUT",
            "message": message,
        },
    )


def _collect_routes(routes, collected: list) -> None:
    for route in routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                entry = f"{method} {route.path}"
                if entry not in collected:
                    collected.append(entry)
        elif getattr(route, "routes", None):
            # Included routers may be wrapped instead of flattened
            _collect_routes(route.routes, collected)


def list_routes(request: Request) -> list:
    """List "METHOD /path" for every API route, including nested routers."""
    routes = []
    _collect_routes(request.app.routes, routes)
    return routes


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle routing errors; 404 lists the available routes."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.info(f"Route not found: {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Route not found",
                "path": request.url.path,
                "method": request.method,
                "availableRoutes": list_routes(request),
            },
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": "HTTP_ERROR",
            "message": str(exc.detail),
        },
        headers=getattr(exc, "headers", None),
    )
