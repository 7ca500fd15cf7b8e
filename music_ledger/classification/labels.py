"""Label-name heuristics and the performer denylist."""

# Label strings meaning "no label at all"
NO_LABEL_SYNONYMS = frozenset({
    "",
    "[no label]",
    "no label",
    "not on label",
    "self-released",
    "self released",
    "independent",
    "none",
})

# Non-Canadian artists that surface under artistcountry:CA because of
# Canadian release editions
ARTIST_DENYLIST = frozenset({
    "foo fighters",
    "the cure",
    "mumford & sons",
    "nofx",
    "karnivool",
    "scott buckley",
    "the album leaf",
    "andrew bird",
    "denez prigent",
    "fakear",
    "sam sauvage",
    "arif murakami",
})

RELEASE_KINDS = {
    "album": "Album",
    "single": "Single",
    "ep": "EP",
}

UNKNOWN_KIND = "Unknown"
