from pydantic import Field

from beercount.schemas.base import Int32, Int64, WireModel, decode_body


class Batch(WireModel):
    id: Int64 = 0
    beer_id: Int64 = Field(default=0, alias="beerId")
    user: str = ""
    date: Int64 = 0
    count03: Int32 = 0
    count05: Int32 = 0


def decode_batch(raw: bytes) -> Batch:
    return decode_body(Batch, raw)
