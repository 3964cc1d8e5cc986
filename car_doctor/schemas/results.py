"""
Respuestas de escritura con la forma del acuse del driver de MongoDB
(camelCase, igual que lo serializa el cliente oficial).
"""
from typing import Optional
from pydantic import BaseModel
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class InsertOneOut(BaseModel):
    acknowledged: bool
    insertedId: Optional[str] = None

    @classmethod
    def from_result(cls, res: InsertOneResult) -> "InsertOneOut":
        inserted = res.inserted_id
        return cls(
            acknowledged=res.acknowledged,
            insertedId=str(inserted) if inserted is not None else None,
        )


class UpdateOut(BaseModel):
    acknowledged: bool
    modifiedCount: int
    upsertedId: Optional[str] = None
    upsertedCount: int
    matchedCount: int

    @classmethod
    def from_result(cls, res: UpdateResult) -> "UpdateOut":
        upserted = res.upserted_id
        return cls(
            acknowledged=res.acknowledged,
            modifiedCount=res.modified_count,
            upsertedId=str(upserted) if upserted is not None else None,
            upsertedCount=1 if upserted is not None else 0,
            matchedCount=res.matched_count,
        )


class DeleteOut(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, res: DeleteResult) -> "DeleteOut":
        return cls(acknowledged=res.acknowledged, deletedCount=res.deleted_count)
