import re

from fastapi import Depends
from sqlmodel import Session

from app.core.database import get_session
from app.services import UserService

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2**31), 2**31 - 1


def parse_id(raw: str | None) -> int:
    """Parse a path id; anything that is not a 32-bit decimal integer becomes 0."""
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        return 0
    value = int(raw)
    if value < _ID_MIN or value > _ID_MAX:
        return 0
    return value


def path_user_id(id: str) -> int:
    return parse_id(id)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)
