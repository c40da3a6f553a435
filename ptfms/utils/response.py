from typing import Any, Iterable

from pydantic import BaseModel


def success_response(data: Any = None, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def error_response(message: str, data: Any = None) -> dict:
    return {"status": "error", "data": data, "message": message}


def dump_all(schema: type[BaseModel], records: Iterable[Any]) -> list[dict]:
    """Serialize ORM rows through ``schema`` for a list envelope."""
    return [schema.model_validate(record).model_dump() for record in records]
