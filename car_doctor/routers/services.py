# car_doctor/routers/services.py
from fastapi import APIRouter, Depends
from typing import Optional, List, Dict, Any

from ..db import Store, get_store
from ..utils import to_json_doc, to_object_id

router = APIRouter()

SERVICE_PROJECTION = {"title": 1, "price": 1, "service_id": 1, "img": 1}


# GET /services?sort=asc  (cualquier otro valor: precio descendente)
@router.get("", response_model=List[Dict[str, Any]])
async def list_services(
    sort: Optional[str] = None,
    store: Store = Depends(get_store),
):
    direction = 1 if sort == "asc" else -1
    docs = await store.services.find({}).sort("price", direction).to_list(length=None)
    return [to_json_doc(d) for d in docs]


# GET /services/{service_id}  -> null si no existe
@router.get("/{service_id}", response_model=Optional[Dict[str, Any]])
async def get_service(
    service_id: str,
    store: Store = Depends(get_store),
):
    doc = await store.services.find_one({"_id": to_object_id(service_id)}, SERVICE_PROJECTION)
    return to_json_doc(doc)
