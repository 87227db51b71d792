import unicodedata

# Ligatures that NFD leaves intact
_LIGATURES = str.maketrans(
    {
        "œ": "oe",
        "Œ": "oe",
        "æ": "ae",
        "Æ": "ae",
        "ß": "ss",
        "ﬁ": "fi",
        "ﬂ": "fl",
    }
)


def _is_diacritic(c: str) -> bool:
    return 0x0300 <= ord(c) <= 0x036F


def normalize(word: str) -> str:
    """Lowercase, expand ligatures and strip accents for matching.

    "Émile" and "emile" both give "emile"; "Cœur" gives "coeur".
    """
    nfd = unicodedata.normalize("NFD", word.lower().translate(_LIGATURES))
    return "".join(c for c in nfd if not _is_diacritic(c))
