"""
Errores de la API.

Los errores de autenticación/autorización se devuelven como
``{"error": ..., "message": ...}``. ``StoreError`` no tiene handler:
se propaga al 500 por defecto del framework.
"""
from typing import Any
from fastapi import Request
from fastapi.responses import JSONResponse


class ApiError(Exception):
    status_code: int = 500
    message: str = "internal error"
    error: Any = True

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCredentials(ApiError):
    status_code = 401
    message = "unauthorized access"


class InvalidCredentials(ApiError):
    status_code = 401
    message = "unauthorized access"


class ForbiddenAccess(ApiError):
    status_code = 403
    message = "forbidden access"
    error = 1


class AuthenticationError(Exception):
    """Token con firma inválida, malformado o expirado."""


class StoreError(Exception):
    """Fallo de la base de datos o identificador no parseable."""


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.message},
    )
