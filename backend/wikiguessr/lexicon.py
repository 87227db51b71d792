"""Static French lookup tables used by the similarity engine.

Kept apart from the algorithms so another language can ship its own tables.
All words are stored in normalized form (lowercase, no accents).
"""

from typing import NamedTuple

# Substituting inside one group costs 0.5
PHONETIC_GROUPS: tuple[frozenset[str], ...] = (
    frozenset("scz"),  # sibilants
    frozenset("bp"),  # bilabial stops
    frozenset("dt"),  # alveolar stops
    frozenset("gkq"),  # velar stops
    frozenset("vf"),  # labiodental fricatives
    frozenset("ea"),  # open vowels
    frozenset("iy"),  # close front vowels
    frozenset("ou"),  # back vowels
    frozenset("mn"),  # nasals
)

# AZERTY neighbours, substituting with one costs 0.7
KEYBOARD_NEIGHBORS: dict[str, frozenset[str]] = {
    key: frozenset(neighbors)
    for key, neighbors in {
        "a": "zqs",
        "z": "aesq",
        "e": "zrds",
        "r": "etfd",
        "t": "rygf",
        "y": "tuhg",
        "u": "yijh",
        "i": "uokj",
        "o": "iplk",
        "p": "oml",
        "q": "aswz",
        "s": "qdzawe",
        "d": "sfer",
        "f": "dgrt",
        "g": "fhty",
        "h": "gjyu",
        "j": "hkui",
        "k": "jlio",
        "l": "kmop",
        "m": "lp",
        "w": "qsx",
        "x": "wc",
        "c": "xv",
        "v": "cb",
        "b": "vn",
        "n": "b",
    }.items()
}

# Canonical member → related words
SEMANTIC_GROUPS: dict[str, tuple[str, ...]] = {
    # numbers
    "un": ("une", "premier", "premiere"),
    "deux": ("deuxieme", "second", "seconde"),
    "trois": ("troisieme",),
    # common words
    "grand": ("grande", "gros", "grosse", "enorme", "vaste", "immense"),
    "petit": ("petite", "peu", "minuscule"),
    "bon": ("bonne", "bien", "meilleur", "meilleure"),
    "mauvais": ("mauvaise", "mal"),
    "homme": ("humain", "personne", "individu", "garcon"),
    "femme": ("dame", "personne", "fille"),
    "ville": ("cite", "commune", "metropole", "urbain"),
    "pays": ("nation", "etat", "territoire"),
    "roi": ("monarque", "souverain"),
    "guerre": ("conflit", "combat", "bataille"),
    "paix": ("armistice", "treve"),
    # time
    "jour": ("journee",),
    "an": ("annee", "ans"),
    "siecle": ("centenaire",),
    # directions
    "nord": ("septentrional",),
    "sud": ("meridional",),
    "est": ("oriental",),
    "ouest": ("occidental",),
}


class SuffixRule(NamedTuple):
    suffix: str
    replacement: str
    min_length: int = 0
    unless: str | None = None  # skip when the word ends with this instead

    def apply(self, word: str) -> str | None:
        if not word.endswith(self.suffix) or len(word) < self.min_length:
            return None
        if self.unless and word.endswith(self.unless):
            return None
        return word[: len(word) - len(self.suffix)] + self.replacement


# Each family contributes at most one candidate: the first rule that applies.
SUFFIX_FAMILIES: tuple[tuple[SuffixRule, ...], ...] = (
    # plural → singular (animaux → animal, chats → chat)
    (
        SuffixRule("aux", "al"),
        SuffixRule("s", "", unless="ss"),
        SuffixRule("x", ""),
    ),
    # feminine → masculine (passee → passe, grande → grand)
    (
        SuffixRule("ee", "e"),
        SuffixRule("e", "", min_length=3),
    ),
    # conjugated → infinitive (parlaient/parlait/parlent/parlant → parler)
    (
        SuffixRule("aient", "er"),
        SuffixRule("ait", "er"),
        SuffixRule("ent", "er"),
        SuffixRule("ant", "er"),
    ),
    # diminutive (fillette → fill)
    (SuffixRule("ette", ""),),
)
