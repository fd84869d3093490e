import re

from fastapi import Request

from beercount.core.errors import BadRequest
from beercount.services.store import Store

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_store(request: Request) -> Store:
    return request.app.state.store


async def read_body(request: Request) -> bytes:
    limit: int = request.app.state.settings.max_body_bytes

    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > limit:
        raise BadRequest(f"Request body exceeds {limit} bytes")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise BadRequest(f"Request body exceeds {limit} bytes")
    return bytes(body)


def parse_id(raw: str) -> int:
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequest(f"Invalid id {raw!r}")

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise BadRequest(f"Id {raw} is out of range")
    return value
