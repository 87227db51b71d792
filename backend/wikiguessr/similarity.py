"""Orthographic, morphological and semantic similarity between words.

Every function here is pure and expects normalized input (see normalize.py);
the lemma and semantic helpers normalize again so raw guesses are accepted.
Lookup tables live in lexicon.py, weights in config.py.
"""

from __future__ import annotations

from rapidfuzz.distance import OSA

from . import config
from .lexicon import KEYBOARD_NEIGHBORS, PHONETIC_GROUPS, SEMANTIC_GROUPS, SUFFIX_FAMILIES
from .normalize import normalize

_PHONETIC_COST = 0.5
_KEYBOARD_COST = 0.7
_NGRAM_PAD = "_"

_NO_NEIGHBORS: frozenset[str] = frozenset()


def _semantic_membership() -> dict[str, frozenset[int]]:
    """Map each word to the indices of the SEMANTIC_GROUPS entries it belongs to."""
    membership: dict[str, set[int]] = {}
    for group_id, (canonical, related) in enumerate(SEMANTIC_GROUPS.items()):
        for member in (canonical, *related):
            membership.setdefault(member, set()).add(group_id)
    return {word: frozenset(ids) for word, ids in membership.items()}


_SEMANTIC_MEMBERSHIP = _semantic_membership()


# ---------------------------------------------------------------------------
# Edit distances
# ---------------------------------------------------------------------------

def damerau_levenshtein_distance(a: str, b: str) -> int:
    """Insert/delete/substitute/adjacent-transpose distance, unit costs.

    This is the restricted (optimal string alignment) variant: a transposed
    pair is never edited again.
    """
    return OSA.distance(a, b)


def substitution_cost(a: str, b: str) -> float:
    if a == b:
        return 0.0
    for group in PHONETIC_GROUPS:
        if a in group and b in group:
            return _PHONETIC_COST
    if b in KEYBOARD_NEIGHBORS.get(a, _NO_NEIGHBORS) or a in KEYBOARD_NEIGHBORS.get(b, _NO_NEIGHBORS):
        return _KEYBOARD_COST
    return 1.0


def weighted_levenshtein_distance(a: str, b: str) -> float:
    """Levenshtein distance where close-sounding or adjacent keys substitute cheaply."""
    if not a:
        return float(len(b))
    if not b:
        return float(len(a))

    prev = [float(j) for j in range(len(b) + 1)]
    for i, ca in enumerate(a, start=1):
        curr = [float(i)] + [0.0] * len(b)
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                curr[j] = prev[j - 1]
            else:
                curr[j] = min(
                    prev[j] + 1,  # deletion
                    curr[j - 1] + 1,  # insertion
                    prev[j - 1] + substitution_cost(ca, cb),
                )
        prev = curr
    return prev[-1]


# ---------------------------------------------------------------------------
# Similarity scores (all in [0, 1])
# ---------------------------------------------------------------------------

def _ngrams(word: str, n: int) -> set[str]:
    padded = _NGRAM_PAD * (n - 1) + word + _NGRAM_PAD * (n - 1)
    return {padded[i : i + n] for i in range(len(padded) - n + 1)}


def ngram_similarity(a: str, b: str, n: int = 2) -> float:
    """Jaccard similarity of the padded n-gram sets."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    grams_a = _ngrams(a, n)
    grams_b = _ngrams(b, n)
    return len(grams_a & grams_b) / len(grams_a | grams_b)


def combined_similarity(a: str, b: str) -> float:
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    edit_sim = 1 - damerau_levenshtein_distance(a, b) / max_len
    weighted_sim = 1 - weighted_levenshtein_distance(a, b) / max_len
    ngram_sim = ngram_similarity(a, b, 2)
    return (
        edit_sim * config.EDIT_WEIGHT
        + weighted_sim * config.WEIGHTED_EDIT_WEIGHT
        + ngram_sim * config.NGRAM_WEIGHT
    )


# ---------------------------------------------------------------------------
# Morphology and meaning
# ---------------------------------------------------------------------------

def lemma_candidates(word: str) -> frozenset[str]:
    """Possible root forms of *word*, always including the word itself.

    Rough suffix stripping only (chats → chat, animaux → animal,
    parlaient → parler); candidates need not be real words.
    """
    normalized = normalize(word)
    candidates = {normalized}
    for family in SUFFIX_FAMILIES:
        for rule in family:
            lemma = rule.apply(normalized)
            if lemma is not None:
                candidates.add(lemma)
                break
    return frozenset(candidates)


def are_morphological_variants(a: str, b: str) -> bool:
    return not lemma_candidates(a).isdisjoint(lemma_candidates(b))


def are_semantically_similar(a: str, b: str) -> bool:
    norm_a = normalize(a)
    norm_b = normalize(b)
    if norm_a == norm_b:
        return True
    groups_a = _SEMANTIC_MEMBERSHIP.get(norm_a)
    groups_b = _SEMANTIC_MEMBERSHIP.get(norm_b)
    return bool(groups_a and groups_b and groups_a & groups_b)
