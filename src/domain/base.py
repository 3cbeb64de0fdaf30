"""Shared base for persisted domain entities"""

import uuid
from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel

# SQLite only autoincrements INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer(), "sqlite")


def generate_uuid() -> str:
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    pass
