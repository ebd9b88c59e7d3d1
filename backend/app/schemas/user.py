from pydantic import BaseModel, Field
from typing import List
from datetime import date

class NewUser(BaseModel):
    name: str = Field(max_length=50)
    email: str = Field(max_length=30)
    created_at: date = Field(alias="createdAt")

class UserRead(BaseModel):
    id: int
    name: str
    email: str
    created_at: date = Field(alias="createdAt")

class UserList(BaseModel):
    data: List[UserRead]

class ServerMessage(BaseModel):
    message: str
