"""Request and response models for the HTTP API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .search import Result


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalculateRequest(_CamelModel):
    price_per_volume: float
    max_volume: int


class ResultOut(_CamelModel):
    volume: float
    cost_major_units: str
    volume_is_palindromic: bool
    kind: str

    @classmethod
    def from_result(cls, result: Result) -> "ResultOut":
        return cls(
            volume=result.volume,
            cost_major_units=result.cost_major_units,
            volume_is_palindromic=result.volume_is_palindromic,
            kind=result.kind.value,
        )


class CalculateResponse(_CamelModel):
    results: List[ResultOut] = []
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
