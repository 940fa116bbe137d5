from __future__ import annotations

from fibtemp.models.config import AppSettings
from fibtemp.models.results import ConversionResult, SequenceMode, SequenceResult

__all__ = [
    # config
    "AppSettings",
    # results
    "ConversionResult",
    "SequenceMode",
    "SequenceResult",
]
