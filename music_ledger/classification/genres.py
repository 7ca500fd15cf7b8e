"""Free-text genre tag -> canonical genre category."""

from types import MappingProxyType

OTHER = "Other"

CANONICAL_GENRES = (
    "Hip-Hop",
    "Electronic",
    "Rock",
    "Metal",
    "Punk",
    "Pop",
    "Folk",
    "Country",
    "Jazz",
    "Blues",
    "Classical",
    "Experimental",
    "R&B / Soul",
    "Reggae",
    "World",
    OTHER,
)

_GENRE_MAP = {
    # Hip-Hop
    "hip hop": "Hip-Hop", "hip-hop": "Hip-Hop", "rap": "Hip-Hop", "trap": "Hip-Hop",
    "boom bap": "Hip-Hop", "drill": "Hip-Hop", "conscious rap": "Hip-Hop",
    "alternative hip hop": "Hip-Hop", "underground rap": "Hip-Hop",
    "lo-fi hip hop": "Hip-Hop", "grime": "Hip-Hop", "cloud rap": "Hip-Hop",
    "gangsta rap": "Hip-Hop",
    # Electronic
    "house": "Electronic", "techno": "Electronic", "ambient": "Electronic",
    "edm": "Electronic", "electronic": "Electronic", "electronica": "Electronic",
    "synth-pop": "Electronic", "synthwave": "Electronic",
    "drum and bass": "Electronic", "dubstep": "Electronic", "idm": "Electronic",
    "downtempo": "Electronic", "chillwave": "Electronic", "lo-fi": "Electronic",
    "vaporwave": "Electronic", "hyperpop": "Electronic", "glitch": "Electronic",
    "uk garage": "Electronic", "trance": "Electronic", "electro": "Electronic",
    "minimal techno": "Electronic", "dance": "Electronic",
    # Rock
    "rock": "Rock", "indie rock": "Rock", "alternative rock": "Rock",
    "alternative": "Rock", "shoegaze": "Rock", "post-rock": "Rock",
    "hard rock": "Rock", "garage rock": "Rock", "math rock": "Rock",
    "psychedelic rock": "Rock", "prog rock": "Rock", "noise rock": "Rock",
    "dream pop": "Rock", "grunge": "Rock", "new wave": "Rock",
    "post-grunge": "Rock", "indie": "Rock",
    # Metal
    "metal": "Metal", "heavy metal": "Metal", "death metal": "Metal",
    "black metal": "Metal", "doom metal": "Metal", "metalcore": "Metal",
    "thrash metal": "Metal", "sludge metal": "Metal",
    # Punk
    "punk": "Punk", "punk rock": "Punk", "hardcore": "Punk", "post-punk": "Punk",
    "emo": "Punk", "pop punk": "Punk", "hardcore punk": "Punk",
    "skate punk": "Punk",
    # Pop
    "pop": "Pop", "indie pop": "Pop", "chamber pop": "Pop", "art pop": "Pop",
    "electropop": "Pop", "bedroom pop": "Pop", "baroque pop": "Pop",
    "bubblegum pop": "Pop", "k-pop": "Pop",
    # Folk
    "folk": "Folk", "indie folk": "Folk", "singer-songwriter": "Folk",
    "singer/songwriter": "Folk", "acoustic": "Folk", "freak folk": "Folk",
    "contemporary folk": "Folk", "folk rock": "Folk", "neofolk": "Folk",
    # Country
    "country": "Country", "alt-country": "Country", "americana": "Country",
    "bluegrass": "Country", "outlaw country": "Country",
    "country rock": "Country",
    # Jazz
    "jazz": "Jazz", "free jazz": "Jazz", "jazz fusion": "Jazz",
    "acid jazz": "Jazz", "bebop": "Jazz", "nu jazz": "Jazz",
    "contemporary jazz": "Jazz", "latin jazz": "Jazz",
    # Blues
    "blues": "Blues", "electric blues": "Blues", "blues rock": "Blues",
    "chicago blues": "Blues",
    # Classical
    "classical": "Classical", "contemporary classical": "Classical",
    "orchestral": "Classical", "chamber music": "Classical",
    "minimalism": "Classical", "opera": "Classical", "soundtrack": "Classical",
    # Experimental
    "experimental": "Experimental", "avant-garde": "Experimental",
    "noise": "Experimental", "drone": "Experimental", "improv": "Experimental",
    "sound art": "Experimental",
    # R&B / Soul
    "r&b": "R&B / Soul", "rnb": "R&B / Soul", "r&b/soul": "R&B / Soul",
    "r&b / soul": "R&B / Soul", "soul": "R&B / Soul", "neo soul": "R&B / Soul",
    "funk": "R&B / Soul", "gospel": "R&B / Soul",
    "contemporary r&b": "R&B / Soul",
    # Reggae
    "reggae": "Reggae", "dub": "Reggae", "dancehall": "Reggae", "ska": "Reggae",
    # World
    "world": "World", "world music": "World", "afrobeat": "World",
    "latin": "World", "cumbia": "World", "traditional": "World",
    "indigenous": "World", "afropop": "World", "throat singing": "World",
    "powwow": "World", "first nations": "World", "celtic": "World",
    "francophone": "World", "french pop": "World",
}

# Canonical names map to themselves so normalization is idempotent
for _genre in CANONICAL_GENRES:
    _GENRE_MAP.setdefault(_genre.lower(), _genre)

GENRE_MAP = MappingProxyType(_GENRE_MAP)
