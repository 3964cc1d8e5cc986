# car_doctor/utils.py
from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime

from .errors import StoreError


def _plain(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return to_json_doc(value)
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def to_json_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Documento tal cual sale de Mongo, apto para JSON.
    Mantiene la clave ``_id`` (como string) y convierte ObjectIds y datetimes
    también en subdocumentos y listas. Si doc es None, devuelve None.
    """
    if doc is None:
        return None
    return {key: _plain(value) for key, value in doc.items()}


def to_object_id(value: str) -> ObjectId:
    """Convierte un string a ObjectId; un id mal formado es un StoreError (500)."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise StoreError(f"Invalid id: {value}") from e
