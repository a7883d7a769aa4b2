"""
Contract Validation Module

JSON Schema контракты вывода numerus и Pydantic модель записи конвертации.
"""

from .records import ConversionRecord, Direction
from .validators import (
    ContractValidator,
    ConversionRecordValidator,
    SchemaLoader,
    validate_conversion_record,
)

__all__ = [
    # Models
    "ConversionRecord",
    "Direction",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRecordValidator",
    # Functions
    "validate_conversion_record",
]
