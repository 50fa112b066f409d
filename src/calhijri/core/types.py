from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

Calendar = Literal["gregorian", "hijri"]
Language = Literal["ar", "en"]
FormatStyle = Literal["numeric", "short", "monthYear", "full"]

CALENDARS: Tuple[str, ...] = ("gregorian", "hijri")


class ErrorKind(str, Enum):
    INPUT_OUT_OF_RANGE = "input_out_of_range"
    INVALID_NATIVE_DATE = "invalid_native_date"
    UNPARSABLE_TEXT = "unparsable_text"
    POST_CONVERSION_INVALID = "post_conversion_invalid"
    UNSUPPORTED_CALENDAR = "unsupported_calendar"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class CalendarDate:
    calendar: Calendar
    year: int
    month: int
    day: int
    month_name: str
    month_name_ar: str
    day_of_week: int  # 0=Sunday..6=Saturday
    day_of_week_name: str
    day_of_week_name_ar: str
    is_valid: bool = True
    julian_day: Optional[float] = None

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        """Gregorian labels as a ``datetime.date`` (Julian labels before 1582 are kept as-is)."""
        if self.calendar != "gregorian":
            raise ValueError("Only Gregorian dates map onto datetime.date")
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.is_valid != (len(self.errors) == 0):
            raise ValueError("is_valid must be True exactly when errors is empty")

    @classmethod
    def from_messages(cls, errors, warnings=()) -> "ValidationResult":
        errors = tuple(errors)
        return cls(is_valid=not errors, errors=errors, warnings=tuple(warnings))


@dataclass(frozen=True)
class ConversionResult:
    success: bool
    date: Optional[CalendarDate] = None
    error: Optional[str] = None
    warnings: Tuple[str, ...] = ()
    kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.success:
            if self.date is None or self.error is not None or self.kind is not None:
                raise ValueError("A successful result carries a date and no error")
        elif self.date is not None or self.error is None:
            raise ValueError("A failed result carries an error and no date")

    @classmethod
    def ok(cls, d: CalendarDate, warnings=()) -> "ConversionResult":
        return cls(success=True, date=d, warnings=tuple(warnings))

    @classmethod
    def fail(cls, kind: ErrorKind, error: str) -> "ConversionResult":
        return cls(success=False, error=error, kind=kind)


@dataclass(frozen=True)
class IslamicEvent:
    name: str
    name_ar: str
    hijri_month: int
    hijri_day: int
    is_holiday: bool
    description: str = ""
    description_ar: str = ""


@dataclass(frozen=True)
class MonthBoundaries:
    first_day: ConversionResult
    last_day: ConversionResult
    total_days: int


@dataclass(frozen=True)
class CurrentDates:
    gregorian: CalendarDate
    hijri: CalendarDate
    julian_day: float


@dataclass(frozen=True)
class DayInfo:
    gregorian: CalendarDate
    hijri: CalendarDate
    julian_day: float
    events: Tuple[IslamicEvent, ...] = ()
    attributes: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class HijriMonthDay:
    day: int
    gregorian: CalendarDate
    is_today: bool
    is_weekend: bool


@dataclass(frozen=True)
class HijriMonthGrid:
    year: int
    month: int
    month_name: str
    month_name_ar: str
    days: Tuple[HijriMonthDay, ...]
