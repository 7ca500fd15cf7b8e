"""Main entry point for the Canadian music ledger build."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .errors import LedgerError

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None):
    # Read directly so logging is up before any setting is validated
    level = (level or os.environ.get("LEDGER_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def main(output_dir: Optional[Path] = None) -> int:
    """Entry point; returns the process exit code."""
    configure_logging()
    try:
        # Settings are validated when the pipeline modules are first imported
        from .config import OUTPUT_DIR
        from .output import ReleaseSink
        from .pipeline import default_adapters, run_pipeline

        run_pipeline(default_adapters(), ReleaseSink(output_dir or OUTPUT_DIR))
    except LedgerError as e:
        logger.error(f"Build failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
