"""Per-field merge policies for duplicate release observations."""

from dataclasses import fields
from enum import Enum
from types import MappingProxyType

from ..classification import DEFAULT_TABLES, OTHER, ClassificationTables
from ..models import Release


class MergePolicy(Enum):
    FIRST_WINS = "first-wins"
    UNION = "union"
    PREFER_EXISTING_NON_EMPTY = "prefer-existing-non-empty"
    PREFER_NON_DEFAULT = "prefer-non-default"


# Fields not listed keep their first-seen value
MERGE_POLICIES = MappingProxyType({
    "platforms": MergePolicy.UNION,
    "artist_region": MergePolicy.PREFER_EXISTING_NON_EMPTY,
    "release_date": MergePolicy.PREFER_EXISTING_NON_EMPTY,
    "label": MergePolicy.PREFER_EXISTING_NON_EMPTY,
    "primary_genre": MergePolicy.PREFER_NON_DEFAULT,
})

# Default value that PREFER_NON_DEFAULT fields give way from
FIELD_DEFAULTS = MappingProxyType({
    "primary_genre": OTHER,
})


def merge_field(policy: MergePolicy, existing, incoming, default=None):
    """Resolve one field of two observations according to its policy."""
    if policy is MergePolicy.UNION:
        return list(dict.fromkeys(list(existing) + list(incoming)))
    if policy is MergePolicy.PREFER_EXISTING_NON_EMPTY:
        return existing if existing else incoming
    if policy is MergePolicy.PREFER_NON_DEFAULT:
        if existing == default and incoming and incoming != default:
            return incoming
        return existing
    return existing


def merge(
    existing: Release,
    incoming: Release,
    policies=MERGE_POLICIES,
    tables: ClassificationTables = DEFAULT_TABLES,
) -> Release:
    """
    Merge a later observation into an existing record.

    Returns a new Release; neither argument is modified. When the label
    is adopted from the incoming record, independence is re-derived
    from it so the two never disagree.
    """
    changes = {}
    for f in fields(Release):
        policy = policies.get(f.name, MergePolicy.FIRST_WINS)
        changes[f.name] = merge_field(
            policy,
            getattr(existing, f.name),
            getattr(incoming, f.name),
            FIELD_DEFAULTS.get(f.name),
        )

    if changes["label"] != existing.label:
        changes["is_independent"] = tables.is_independent(changes["label"])

    # Release.__post_init__ drops a secondary genre equal to the new primary
    return Release(**changes)
