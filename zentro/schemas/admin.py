from pydantic import BaseModel


class AdminResponse(BaseModel):
    id: int
    email: str
    role: str


class Token(BaseModel):
    access_token: str
    token_type: str
