from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Date
from typing import Optional
from datetime import date

class User(SQLModel, table=True):
    __tablename__ = "users"
    # never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=50, nullable=False)
    email: str = Field(max_length=30, nullable=False)
    created_at: date = Field(sa_column=Column("createdAt", Date, nullable=False))
