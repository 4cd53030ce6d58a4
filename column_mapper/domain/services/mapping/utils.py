from functools import lru_cache
import re

_CAMEL_BOUNDARY_RE = re.compile("([a-z0-9])([A-Z])")
_SEPARATOR_RE = re.compile("[\\s_\\-./]+")
_NON_ALNUM_RE = re.compile("[^a-z0-9]")


@lru_cache(maxsize=1024)
def normalize_text(text: str) -> str:
    """Lowercase and strip everything but letters and digits."""
    return _NON_ALNUM_RE.sub("", text.lower())


@lru_cache(maxsize=1024)
def tokenize(text: str) -> tuple[str, ...]:
    """Split a column name on separators and camelCase boundaries."""
    spaced = _CAMEL_BOUNDARY_RE.sub("\\1 \\2", text.strip())
    return tuple(
        normalize_text(part)
        for part in _SEPARATOR_RE.split(spaced)
        if normalize_text(part)
    )


def snake_case(text: str) -> str:
    return "_".join(tokenize(text))


def clear_caches() -> None:
    normalize_text.cache_clear()
    tokenize.cache_clear()
