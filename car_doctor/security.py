from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError

from .config import get_settings
from .errors import AuthenticationError, InvalidCredentials, MissingCredentials

logger = logging.getLogger(__name__)

ALGO = "HS256"
# solo firma y exp: aud/sub/jti/iss del payload no se validan
DECODE_OPTIONS = {"verify_aud": False, "verify_sub": False, "verify_jti": False, "verify_iss": False}
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(payload: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Firma el payload recibido (se espera al menos un email) sin validarlo.
    Se añaden iat y exp; si el payload ya los traía se sobreescriben.
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.access_token_expires_hours)
    claims = dict(payload)
    claims["iat"] = now
    claims["exp"] = now + expires_delta
    return jwt.encode(claims, settings.access_token_secret, algorithm=ALGO)


def decode_access_token(token: str) -> Dict[str, Any]:
    # firma inválida, token malformado o expirado: mismo error para el caller
    try:
        return jwt.decode(token, get_settings().access_token_secret, algorithms=[ALGO], options=DECODE_OPTIONS)
    except JWTError as e:
        raise AuthenticationError(str(e)) from e


async def verify_jwt(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Dict[str, Any]:
    if credentials is None:
        logger.warning("Request sin Authorization Bearer a %s", request.url.path)
        raise MissingCredentials()
    try:
        decoded = decode_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.warning("Token rechazado en %s: %s", request.url.path, e)
        raise InvalidCredentials()
    request.state.decoded = decoded
    return decoded
