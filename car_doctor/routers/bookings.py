# car_doctor/routers/bookings.py
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, List, Optional
import logging

from ..db import Store, get_store
from ..errors import ForbiddenAccess
from ..schemas.booking import StatusPatch
from ..schemas.results import DeleteOut, InsertOneOut, UpdateOut
from ..security import verify_jwt
from ..utils import to_json_doc, to_object_id

logger = logging.getLogger(__name__)

router = APIRouter()


# GET /bookings?email=...  (solo las reservas del dueño del token)
@router.get("", response_model=List[Dict[str, Any]])
async def list_bookings(
    email: Optional[str] = None,
    decoded: Dict[str, Any] = Depends(verify_jwt),
    store: Store = Depends(get_store),
):
    # Sin ?email el claim se compara contra None: 403 salvo que el token
    # tampoco tenga email. Se mantiene así a propósito.
    if decoded.get("email") != email:
        logger.warning("Acceso prohibido: token=%s query=%s", decoded.get("email"), email)
        raise ForbiddenAccess()

    query: Dict[str, Any] = {}
    if email:
        query = {"email": email}
    docs = await store.bookings.find(query).to_list(length=None)
    return [to_json_doc(d) for d in docs]


# POST /bookings  (se inserta tal cual llega)
@router.post("", response_model=InsertOneOut)
async def create_booking(
    booking: Dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    res = await store.bookings.insert_one(booking)
    logger.info("Reserva creada %s para %s", res.inserted_id, booking.get("email"))
    return InsertOneOut.from_result(res)


# PATCH /bookings/{booking_id}  (solo cambia status)
@router.patch("/{booking_id}", response_model=UpdateOut)
async def update_booking_status(
    booking_id: str,
    payload: Optional[StatusPatch] = None,
    store: Store = Depends(get_store),
):
    # sin body: status = null
    status = payload.status if payload else None
    res = await store.bookings.update_one(
        {"_id": to_object_id(booking_id)},
        {"$set": {"status": status}},
    )
    logger.info("Reserva %s -> status=%s (modificadas: %s)", booking_id, status, res.modified_count)
    return UpdateOut.from_result(res)


@router.delete("/{booking_id}", response_model=DeleteOut)
async def delete_booking(
    booking_id: str,
    store: Store = Depends(get_store),
):
    res = await store.bookings.delete_one({"_id": to_object_id(booking_id)})
    logger.info("Reserva %s eliminada (borradas: %s)", booking_id, res.deleted_count)
    return DeleteOut.from_result(res)
