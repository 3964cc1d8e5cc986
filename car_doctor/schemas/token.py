from pydantic import BaseModel


class TokenOut(BaseModel):
    token: str
