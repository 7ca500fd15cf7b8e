from .sink import ReleaseSink
from .tally import compute_tally, in_window

__all__ = ["ReleaseSink", "compute_tally", "in_window"]
