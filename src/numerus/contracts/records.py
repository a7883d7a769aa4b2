"""
ConversionRecord — результат конвертации одного токена CLI

Immutable Pydantic модель; model_dump(mode="json") соответствует
contracts/schema/conversion_record.json.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from numerus.core.constants import EXTENDED_MAX_LEN
from numerus.core.errors import ErrorKind, NumerusError, explain
from numerus.core.fraction import Fraction


class Direction(str, Enum):
    """Направление конвертации"""

    TO_NUMERAL = "to_numeral"
    TO_VALUE = "to_value"


class ConversionRecord(BaseModel):
    """Запись о конвертации одного входного токена."""

    input: str = Field(..., description="Токен в том виде, в котором его ввёл пользователь")
    direction: Direction = Field(..., description="Направление конвертации")
    status: ErrorKind = Field(..., description="Статус конвертации")
    numeral: Optional[str] = Field(None, description="Canonical numeral (при успехе)")
    int_part: Optional[int] = Field(None, description="Целая часть значения")
    twelfths: Optional[int] = Field(None, description="Двенадцатые доли значения")
    value: Optional[float] = Field(None, description="Значение как float")
    message: Optional[str] = Field(None, description="Описание ошибки")

    model_config = {"frozen": True}  # Immutable

    @field_validator("numeral")
    @classmethod
    def validate_numeral_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > EXTENDED_MAX_LEN:
            raise ValueError(f"numeral longer than {EXTENDED_MAX_LEN} characters: {v!r}")
        return v

    @classmethod
    def success(
        cls, token: str, direction: Direction, numeral: str, fraction: Fraction
    ) -> "ConversionRecord":
        return cls(
            input=token,
            direction=direction,
            status=ErrorKind.OK,
            numeral=numeral,
            int_part=fraction.int_part,
            twelfths=fraction.twelfths,
            value=fraction.value,
        )

    @classmethod
    def failure(
        cls, token: str, direction: Direction, error: NumerusError
    ) -> "ConversionRecord":
        return cls(
            input=token,
            direction=direction,
            status=error.kind,
            message=explain(error.kind),
        )

    def to_json_dict(self) -> Dict[str, Any]:
        """Dict для JSON вывода (message только при ошибке)."""
        exclude = {"message"} if self.message is None else set()
        return self.model_dump(mode="json", exclude=exclude)
