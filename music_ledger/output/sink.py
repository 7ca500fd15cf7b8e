"""Persistence of the release list and tally artifacts."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Tuple

from ..config import RELEASES_FILE, TALLY_FILE
from ..errors import SinkError
from ..models import Release, Tally

logger = logging.getLogger(__name__)


class ReleaseSink:
    """
    Write the two artifacts the dashboard reads.

    Both files are fully replaced every run. Each is first written to a
    temporary file beside its target, and targets are only swapped in
    once both temporaries exist. Previous artifacts are moved aside
    during the swap and put back if it fails, so a failed run never
    leaves one new artifact next to one old or missing one.
    """

    def __init__(
        self,
        output_dir: Path,
        releases_name: str = RELEASES_FILE,
        tally_name: str = TALLY_FILE,
    ):
        self.output_dir = Path(output_dir)
        self.releases_path = self.output_dir / releases_name
        self.tally_path = self.output_dir / tally_name

    def write(self, releases: List[Release], tally: Tally) -> Tuple[Path, Path]:
        """
        Serialize and persist both artifacts.

        Raises:
            SinkError: if either artifact cannot be written.
        """
        for release in releases:
            if not release.platforms:
                raise SinkError(f"Release without platforms: {release.artist} - {release.title}")

        payloads = [
            (self.releases_path, [r.to_dict() for r in releases]),
            (self.tally_path, tally.to_dict()),
        ]

        staged = []
        backups = {}
        swapped = []
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            for target, payload in payloads:
                staged.append((self._stage(target, payload), target))
            for temp_path, target in staged:
                if target.exists():
                    backup = target.with_name(f".{target.name}.bak")
                    os.replace(target, backup)
                    backups[target] = backup
                os.replace(temp_path, target)
                swapped.append(target)
        except (OSError, TypeError, ValueError) as e:
            self._rollback(staged, backups, swapped)
            raise SinkError(f"Failed to write output artifacts: {e}") from e

        for backup in backups.values():
            backup.unlink()

        logger.info(f"Output written to: {self.releases_path}")
        logger.info(f"  - {len(releases)} releases")
        logger.info(f"Tally written to: {self.tally_path}")
        return self.releases_path, self.tally_path

    def _rollback(self, staged, backups, swapped):
        """Put every previous artifact back and drop anything new."""
        for target in swapped:
            if target not in backups:
                target.unlink()
        for target, backup in backups.items():
            os.replace(backup, target)
        for temp_path, _ in staged:
            if temp_path.exists():
                temp_path.unlink()

    def _stage(self, target: Path, payload) -> Path:
        fd, name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=self.output_dir)
        temp_path = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.write("\n")
        except BaseException:
            temp_path.unlink()
            raise
        return temp_path
