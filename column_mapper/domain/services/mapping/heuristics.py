"""Name similarity heuristics used by the match scorer.

Every function here is pure and returns a raw similarity or signature. The
scorer is the only place that turns these values into confidences.
"""

from collections import Counter
from enum import Enum
from functools import lru_cache
import math

from rapidfuzz.distance import Levenshtein

from .constants import DOMAIN_SYNONYMS, MIN_LOOSE_TERM_LENGTH
from .utils import normalize_text, snake_case, tokenize

_CONSONANT_CLASSES: dict[str, str] = {
    **dict.fromkeys("bfpv", "1"),
    **dict.fromkeys("cgjkqsxz", "2"),
    **dict.fromkeys("dt", "3"),
    "l": "4",
    **dict.fromkeys("mn", "5"),
    "r": "6",
}


class SynonymHit(Enum):
    EXACT = "exact"
    LOOSE = "loose"


def containment_ratio(left: str, right: str) -> float | None:
    """Coverage of the shorter name inside the longer one, or None."""
    a = left.strip().lower()
    b = right.strip().lower()
    if not a or not b or a == b:
        return None
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    if shorter not in longer:
        return None
    return len(shorter) / len(longer)


def levenshtein_similarity(left: str, right: str) -> float:
    """``1 - distance / max(len(a), len(b))`` on lowercased names."""
    a = left.strip().lower()
    b = right.strip().lower()
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)


@lru_cache(maxsize=2048)
def phonetic_signature(text: str) -> str:
    """Soundex-like signature without truncation.

    The first letter is kept; remaining letters are replaced by their
    consonant class, vowels and h/w/y are dropped, and adjacent repeats of a
    class collapse to one digit.
    """
    letters = [ch for ch in text.lower() if "a" <= ch <= "z"]
    if not letters:
        return ""
    first = letters[0]
    signature = [first]
    previous = _CONSONANT_CLASSES.get(first, "")
    for ch in letters[1:]:
        code = _CONSONANT_CLASSES.get(ch, "")
        if code and code != previous:
            signature.append(code)
        if ch not in "hw":
            previous = code
    return "".join(signature)


def common_prefix_length(left: str, right: str) -> int:
    length = 0
    for a, b in zip(left, right):
        if a != b:
            break
        length += 1
    return length


def character_frequency_similarity(left: str, right: str) -> float:
    """Cosine similarity of the letter/digit histograms of two names."""
    a = Counter(normalize_text(left))
    b = Counter(normalize_text(right))
    if not a or not b:
        return 0.0
    dot = sum(count * b[ch] for ch, count in a.items())
    norm = math.sqrt(sum(v * v for v in a.values())) * math.sqrt(
        sum(v * v for v in b.values())
    )
    return dot / norm if norm else 0.0


def length_similarity(left: str, right: str) -> float:
    a = len(normalize_text(left))
    b = len(normalize_text(right))
    if not a or not b:
        return 0.0
    return min(a, b) / max(a, b)


def token_overlap(left: str, right: str, *, prefix_min_length: int = 3) -> tuple[
    frozenset[str], frozenset[str], frozenset[str], bool
]:
    """Return both token sets, their intersection and whether a prefix overlaps."""
    a = frozenset(tokenize(left))
    b = frozenset(tokenize(right))
    shared = a & b
    prefix = False
    if not shared:
        prefix = any(
            min(len(x), len(y)) >= prefix_min_length
            and (x.startswith(y) or y.startswith(x))
            for x in a
            for y in b
        )
    return a, b, shared, prefix


@lru_cache(maxsize=128)
def _concept_terms(concept: str) -> tuple[frozenset[str], frozenset[str]]:
    terms = (concept, *DOMAIN_SYNONYMS.get(concept, ()))
    return (
        frozenset(snake_case(term) for term in terms),
        frozenset(normalize_text(term) for term in terms),
    )


def synonym_hit(name: str, concept: str) -> SynonymHit | None:
    """Classify how a name relates to a canonical domain concept."""
    snake_terms, compact_terms = _concept_terms(concept)
    snake = snake_case(name)
    compact = normalize_text(name)
    if not compact:
        return None
    if snake in snake_terms or compact in compact_terms:
        return SynonymHit.EXACT
    tokens = set(tokenize(name))
    for term in compact_terms:
        if term in tokens:
            return SynonymHit.LOOSE
        if len(term) >= MIN_LOOSE_TERM_LENGTH and term in compact:
            return SynonymHit.LOOSE
    return None


def best_synonym_match(
    left: str, right: str
) -> tuple[str, SynonymHit, SynonymHit] | None:
    """Find the concept both names resolve to, preferring exact hits."""
    best: tuple[str, SynonymHit, SynonymHit] | None = None
    best_rank = -1
    for concept in DOMAIN_SYNONYMS:
        left_hit = synonym_hit(left, concept)
        if left_hit is None:
            continue
        right_hit = synonym_hit(right, concept)
        if right_hit is None:
            continue
        rank = (left_hit is SynonymHit.EXACT) + (right_hit is SynonymHit.EXACT)
        if rank > best_rank:
            best = (concept, left_hit, right_hit)
            best_rank = rank
    return best
