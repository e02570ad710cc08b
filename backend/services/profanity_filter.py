"""Profanity word list lookup and replacement for community posts.

The word list is loaded from a source (static list or exported word file) and
held in a caller-owned ``WordListCache`` for ``ttl_seconds``. The clock is
injectable so expiry can be tested without sleeping.
"""

import logging
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

# Used when the configured source cannot be read
DEFAULT_WORDS = ["spam", "scam"]

REVISE_MESSAGE = "Please revise your message - inappropriate content detected"

_WORD_SPLIT_RE = re.compile(r"[\n,]")


class InappropriateContentError(ValueError):
    """Raised when submitted text contains a listed word."""

    def __init__(self, found_words: list[str]) -> None:
        super().__init__(REVISE_MESSAGE)
        self.found_words = found_words


class WordSource(Protocol):
    def load(self) -> list[str]: ...


class StaticWordSource:
    def __init__(self, words: list[str]) -> None:
        self._words = list(words)

    def load(self) -> list[str]:
        return list(self._words)


class FileWordSource:
    """Reads the admin export format: one word per line (commas also split)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> list[str]:
        return parse_word_list(self.path.read_text(encoding="utf-8"))


@dataclass
class WordListCache:
    value: list[str] | None = None
    expires_at: float = 0.0

    def is_fresh(self, now: float) -> bool:
        return self.value is not None and now < self.expires_at

    def store(self, words: list[str], now: float, ttl_seconds: float) -> None:
        self.value = words
        self.expires_at = now + ttl_seconds

    def clear(self) -> None:
        self.value = None
        self.expires_at = 0.0


@dataclass
class ProfanityCheck:
    has_profanity: bool
    found_words: list[str] = field(default_factory=list)


class ProfanityFilter:
    def __init__(
        self,
        source: WordSource,
        cache: WordListCache | None = None,
        ttl_seconds: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source = source
        self.cache = cache if cache is not None else WordListCache()
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def words(self) -> list[str]:
        """Current word list, reloading from the source once the cache expires."""
        now = self._clock()
        if self.cache.is_fresh(now):
            return list(self.cache.value)

        try:
            words = _normalize_all(self.source.load())
            logger.info("Loaded %d profanity words", len(words))
        except Exception as e:
            logger.error("Failed to load profanity words, using defaults: %s", e)
            words = list(DEFAULT_WORDS)

        self.cache.store(words, now, self.ttl_seconds)
        return list(words)

    def invalidate(self) -> None:
        self.cache.clear()

    def check(self, text: str) -> ProfanityCheck:
        lower_text = text.lower()
        found = [w for w in self.words() if w in lower_text]
        return ProfanityCheck(has_profanity=bool(found), found_words=found)

    def censor(self, text: str) -> str:
        """Replace every listed word (any case) with asterisks of equal length."""
        words = self.words()
        if not words or not text:
            return text
        # Longest first so "scammer" wins over "scam"
        alternation = "|".join(
            re.escape(w) for w in sorted(words, key=len, reverse=True)
        )
        pattern = re.compile(alternation, re.IGNORECASE)
        return pattern.sub(lambda m: "*" * len(m.group(0)), text)

    def ensure_clean(self, *texts: str) -> None:
        found: list[str] = []
        for text in texts:
            for word in self.check(text).found_words:
                if word not in found:
                    found.append(word)
        if found:
            raise InappropriateContentError(found)


# ---------------------------------------------------------------------------
# Word list import/export
# ---------------------------------------------------------------------------

def normalize_word(word: str) -> str:
    return word.strip().lower()


def parse_word_list(text: str) -> list[str]:
    """Parse pasted or exported text into a clean, de-duplicated word list."""
    return _normalize_all(_WORD_SPLIT_RE.split(text))


def export_word_list(words: list[str]) -> str:
    return "\n".join(sorted(_normalize_all(words)))


def _normalize_all(words: list[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for word in words:
        normalized = normalize_word(word)
        if normalized and normalized not in seen:
            seen.add(normalized)
            result.append(normalized)
    return result
