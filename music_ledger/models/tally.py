"""Data model for the summary tally."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class Tally:
    """Windowed counts over the reconciled releases of one run."""

    generated_at: str
    total_releases_last_7_days: int = 0
    total_releases_last_30_days: int = 0
    by_genre: Dict[str, int] = field(default_factory=dict)
    by_province: Dict[str, int] = field(default_factory=dict)
    independent_count: int = 0
    label_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "total_releases_last_7_days": self.total_releases_last_7_days,
            "total_releases_last_30_days": self.total_releases_last_30_days,
            "by_genre": dict(self.by_genre),
            "by_province": dict(self.by_province),
            "independent_count": self.independent_count,
            "label_count": self.label_count,
        }
