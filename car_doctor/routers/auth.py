from typing import Any, Dict
from fastapi import APIRouter, Body
import logging

from ..schemas.token import TokenOut
from ..security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


# POST /jwt  (payload arbitrario, normalmente {"email": ...})
@router.post("/jwt", response_model=TokenOut)
async def issue_token(payload: Dict[str, Any] = Body(...)):
    token = create_access_token(payload)
    logger.info("Token emitido para %s", payload.get("email"))
    return {"token": token}
