from .age_filter import filter_by_age, passes_age_filter
from .merge_policy import MERGE_POLICIES, MergePolicy, merge
from .reconciler import Reconciler, identity_key, sort_for_output

__all__ = [
    "filter_by_age",
    "passes_age_filter",
    "MERGE_POLICIES",
    "MergePolicy",
    "merge",
    "Reconciler",
    "identity_key",
    "sort_for_output",
]
