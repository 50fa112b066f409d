from .types import ErrorKind


class CalhijriError(Exception):
    """Base error. Raised inside the adapter boundary only; public functions return results."""
    kind = ErrorKind.UNEXPECTED


class InputOutOfRange(CalhijriError):
    """Year, month or day outside a calendar's structural bounds."""
    kind = ErrorKind.INPUT_OUT_OF_RANGE


class InvalidNativeDate(CalhijriError):
    """A platform date value that does not represent a real instant."""
    kind = ErrorKind.INVALID_NATIVE_DATE


class UnparsableText(CalhijriError):
    """A date string matching none of the supported layouts."""
    kind = ErrorKind.UNPARSABLE_TEXT


class UnsupportedCalendar(CalhijriError):
    """A calendar name other than 'gregorian' or 'hijri'."""
    kind = ErrorKind.UNSUPPORTED_CALENDAR
