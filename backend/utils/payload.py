# utils/payload.py
import json
from typing import Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def describe_errors(errors) -> str:
    # "field: message" for each pydantic/FastAPI error entry
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def _is_json(media_type: str) -> bool:
    return media_type == "application/json" or media_type.endswith("+json")


async def read_payload(request: Request) -> dict:
    """Return the request body as a dict, from JSON or form encoding.

    Bodies of any other content type are ignored and read as empty.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)
    if not _is_json(media_type):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Malformed JSON body")
    if not isinstance(data, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Request body must be a JSON object")
    return data


# Dependency factory parsing the body into the given schema
def body_of(schema: Type[SchemaT]):
    async def _parse(request: Request) -> SchemaT:
        data = await read_payload(request)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=describe_errors(e.errors()))
    return _parse
