from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

SequenceMode = Literal["compat", "standard"]


class SequenceResult(BaseModel):
    position: int
    reported_position: int
    value: int
    iterations: int
    mode: SequenceMode = "compat"


class ConversionResult(BaseModel):
    selector: str
    temperature: float
    source_unit: str | None = None
    target_unit: str | None = None
    result: float | None = None
    valid: bool = True
