"""Canadian music ledger: aggregate, reconcile and tally recent Canadian releases."""

__version__ = "1.0.0"
