"""Pydantic models for log entries and their parameter values"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from enum import IntEnum
from typing import Annotated, Any, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# Key holding the raw message template in a structured state
ORIGINAL_FORMAT = "{OriginalFormat}"


class UnknownLogLevelError(RuntimeError):
    """Raised when a log level outside of LogLevel reaches the renderer."""


class LogLevel(IntEnum):
    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5


# Parameter values, a closed set of kinds discriminated on `kind`


class BooleanValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["boolean"] = "boolean"
    value: bool


class IntegerValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["integer"] = "integer"
    value: int


class FloatValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["float"] = "float"
    value: float


class DecimalValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["decimal"] = "decimal"
    # NaN and infinities are valid decimals to log
    value: Annotated[Decimal, Field(allow_inf_nan=True)]


class StringValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["string"] = "string"
    value: str


class DateTimeValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["datetime"] = "datetime"
    value: datetime


class DurationValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["duration"] = "duration"
    value: timedelta


class GuidValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["guid"] = "guid"
    value: UUID


class NullValue(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["null"] = "null"


class OtherValue(BaseModel):
    """Any value of an unknown type, kept as its textual form."""

    model_config = ConfigDict(frozen=True)
    kind: Literal["other"] = "other"
    raw_text: str | None = None


ParameterValue = Annotated[
    Union[
        BooleanValue,
        IntegerValue,
        FloatValue,
        DecimalValue,
        StringValue,
        DateTimeValue,
        DurationValue,
        GuidValue,
        NullValue,
        OtherValue,
    ],
    Field(discriminator="kind"),
]


def to_parameter_value(value: Any) -> ParameterValue:
    """Convert an arbitrary Python object to a parameter value.

    Checks run in a fixed order, the first match wins: `bool` must come
    before `int` since it is a subclass of it.
    """
    if value is None:
        return NullValue()
    if isinstance(value, bool):
        return BooleanValue(value=value)
    if isinstance(value, int):
        return IntegerValue(value=value)
    if isinstance(value, float):
        return FloatValue(value=value)
    if isinstance(value, Decimal):
        return DecimalValue(value=value)
    if isinstance(value, datetime):
        return DateTimeValue(value=value)
    if isinstance(value, timedelta):
        return DurationValue(value=value)
    if isinstance(value, UUID):
        return GuidValue(value=value)
    if isinstance(value, str):
        return StringValue(value=value)
    return OtherValue(raw_text=str(value))


class Parameter(BaseModel):
    """A named template argument."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: ParameterValue
    declared_type: str = "NoneType"

    @classmethod
    def from_value(cls, name: str, value: Any) -> Parameter:
        return cls(name=name, value=to_parameter_value(value), declared_type=type(value).__name__)


class LogEntry(BaseModel):
    """A log event handed over by the host logging pipeline.

    `state` is either a tuple of parameters (structured, the template under
    the `ORIGINAL_FORMAT` key) or an already formatted message.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    level: LogLevel
    category: str = ""
    state: tuple[Parameter, ...] | str | None = None
    exception: BaseException | None = None

    @property
    def is_structured(self) -> bool:
        return isinstance(self.state, tuple)

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        """Get the substitutable parameters, without the template sentinel."""
        if not isinstance(self.state, tuple):
            return ()
        return tuple(param for param in self.state if param.name != ORIGINAL_FORMAT)

    @classmethod
    def from_template(
        cls,
        level: LogLevel,
        template: str,
        /,
        *,
        category: str = "",
        exception: BaseException | None = None,
        **params: Any,
    ) -> LogEntry:
        """Build a structured entry, parameters in keyword order."""
        state = [Parameter.from_value(name, value) for name, value in params.items()]
        state.append(Parameter.from_value(ORIGINAL_FORMAT, template))
        return cls(level=level, category=category, state=tuple(state), exception=exception)


__all__ = [
    "ORIGINAL_FORMAT",
    "BooleanValue",
    "DateTimeValue",
    "DecimalValue",
    "DurationValue",
    "FloatValue",
    "GuidValue",
    "IntegerValue",
    "LogEntry",
    "LogLevel",
    "NullValue",
    "OtherValue",
    "Parameter",
    "ParameterValue",
    "StringValue",
    "UnknownLogLevelError",
    "to_parameter_value",
]
