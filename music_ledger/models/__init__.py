from .release import DateRange, Release, parse_date
from .result import ErrorKind, FetchError, FetchResult
from .tally import Tally

__all__ = [
    "DateRange",
    "Release",
    "parse_date",
    "ErrorKind",
    "FetchError",
    "FetchResult",
    "Tally",
]
