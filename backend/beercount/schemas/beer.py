from beercount.schemas.base import Int64, WireModel, decode_body


class Beer(WireModel):
    id: Int64 = 0
    name: str = ""
    desc: str = ""


def decode_beer(raw: bytes) -> Beer:
    return decode_body(Beer, raw)
