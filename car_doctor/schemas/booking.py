from typing import Any
from pydantic import BaseModel, ConfigDict


class StatusPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # sin status se guarda null, como en el cliente original
    status: Any = None
