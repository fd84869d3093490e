from __future__ import annotations

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from beercount.core.errors import BadRequest

Int64 = Annotated[int, Field(ge=-(2**63), le=2**63 - 1)]
Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]

ModelT = TypeVar("ModelT", bound="WireModel")


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, strict=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A null leaves the field at its zero value, like an absent key.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


def decode_body(model: type[ModelT], raw: bytes) -> ModelT:
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise BadRequest(f"Problem unmarshalling json: {detail}") from exc
