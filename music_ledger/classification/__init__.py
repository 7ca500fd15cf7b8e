from .genres import CANONICAL_GENRES, OTHER
from .regions import UNKNOWN_REGION
from .tables import DEFAULT_TABLES, ClassificationTables, normalize_text

__all__ = [
    "CANONICAL_GENRES",
    "OTHER",
    "UNKNOWN_REGION",
    "DEFAULT_TABLES",
    "ClassificationTables",
    "normalize_text",
]
