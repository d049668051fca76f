"""Text analyzer - computes character, word and sentence statistics for text.

Example:
    from text_analytics.analyzer import analyze

    stats = analyze("Pierwsze zdanie. Drugie zdanie! Trzecie zdanie?")
    print(stats.sentence_count)  # 3
    print(stats.average_words_per_sentence)  # 2.0

Tie-break policy (applied everywhere):
    - longest/shortest/most common word: lexicographically smallest word
      among the tied candidates (ordinal, code point comparison).
    - longest sentence: the first sentence in text order among those with
      the highest word count.

Word rule:
    A token left after splitting counts as a word only when it holds at
    least one letter or digit. A lone "-" or a symbol run such as "$^" is
    not a word, while "well-known" and "don't" are single words.

Case folding:
    Each character is lower-cased on its own and keeps its length, so "İ"
    folds to "i" rather than "i" plus a combining dot.
"""

from __future__ import annotations

from collections import Counter
import logging
from typing import Any, NamedTuple
import unicodedata

_logger = logging.getLogger(__name__)

SENTENCE_TERMINATORS = frozenset(".!?")
# Punctuation kept inside words ("well-known", "don't")
KEPT_PUNCTUATION = frozenset("-'")


class TextStatistics(NamedTuple):
    """Statistics computed for a single text."""

    characters_with_spaces: int
    characters_without_spaces: int
    letters: int
    digits: int
    punctuation: int
    word_count: int
    unique_word_count: int
    most_common_word: str
    average_word_length: float
    longest_word: str
    shortest_word: str
    sentence_count: int
    average_words_per_sentence: float
    longest_sentence: str

    @classmethod
    def empty(cls) -> TextStatistics:
        """Return statistics for text without any characters."""
        return cls(0, 0, 0, 0, 0, 0, 0, "", 0.0, "", "", 0, 0.0, "")

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics as a plain dictionary keyed by field name."""
        return dict(self._asdict())


class CharacterCounts(NamedTuple):
    """Per-category character counts."""

    total: int
    whitespace: int
    letters: int
    digits: int
    punctuation: int


def is_punctuation(char: str) -> bool:
    """Check whether a character belongs to a Unicode punctuation category.

    Args:
        char: A single character.

    Returns:
        True for connector, dash, open/close, quote and other punctuation.
    """
    return unicodedata.category(char).startswith("P")


def count_characters(text: str) -> CharacterCounts:
    """Classify every character of the text.

    Args:
        text: The input text.

    Returns:
        CharacterCounts with totals per category.
    """
    whitespace = letters = digits = punctuation = 0
    for char in text:
        if char.isspace():
            whitespace += 1
        elif char.isalpha():
            letters += 1
        elif char.isdecimal():
            digits += 1
        elif is_punctuation(char):
            punctuation += 1
    return CharacterCounts(len(text), whitespace, letters, digits, punctuation)


def _is_word(token: str) -> bool:
    return any(char.isalnum() for char in token)


def _lower_char(char: str) -> str:
    # "İ".lower() is "i" + U+0307; keep one character per character
    return char.lower()[0]


def extract_words(text: str) -> list[str]:
    """Extract lower-cased words from text.

    Every punctuation character except hyphen and apostrophe acts as a
    separator. Tokens without a single letter or digit (a lone "-") are
    dropped.

    Args:
        text: The input text to extract words from.

    Returns:
        List of words in text order.
    """
    cleaned = "".join(
        " "
        if is_punctuation(char) and char not in KEPT_PUNCTUATION
        else _lower_char(char)
        for char in text
    )
    return [token for token in cleaned.split() if _is_word(token)]


def split_sentences(text: str) -> list[str]:
    """Split text into sentences on '.', '!' and '?'.

    Sentences keep their original case and are stripped of surrounding
    whitespace. Fragments without any word are skipped, and trailing text
    without a terminator still forms a sentence.

    Args:
        text: The input text.

    Returns:
        List of sentences in text order.
    """
    sentences: list[str] = []
    buffer: list[str] = []

    def close_sentence() -> None:
        sentence = "".join(buffer).strip()
        buffer.clear()
        if sentence and extract_words(sentence):
            sentences.append(sentence)

    for char in text:
        buffer.append(char)
        if char in SENTENCE_TERMINATORS:
            close_sentence()

    close_sentence()
    return sentences


def analyze_text(text: str | None) -> Counter[str]:
    """Count how often each word occurs in the text.

    Args:
        text: The input text to analyze.

    Returns:
        Counter object with word frequencies.
    """
    return Counter(extract_words(text or ""))


def most_common_words(
    word_counts: Counter[str], top_n: int | None = None
) -> list[tuple[str, int]]:
    """List words from most to least frequent.

    Unlike Counter.most_common, words with equal counts are ordered
    alphabetically rather than by first occurrence.

    Args:
        word_counts: Counter object with word frequencies.
        top_n: If provided, only return the top N words.

    Returns:
        List of (word, count) pairs.
    """
    items = sorted(word_counts.items(), key=lambda item: (-item[1], item[0]))
    return items if top_n is None else items[:top_n]


def _longest_word(words: list[str]) -> str:
    return min(words, key=lambda word: (-len(word), word), default="")


def _shortest_word(words: list[str]) -> str:
    return min(words, key=lambda word: (len(word), word), default="")


def _most_common_word(word_counts: Counter[str]) -> str:
    best = most_common_words(word_counts, 1)
    return best[0][0] if best else ""


def _longest_sentence(sentences: list[str]) -> str:
    longest = ""
    longest_count = 0
    for sentence in sentences:
        count = len(extract_words(sentence))
        # Strict comparison keeps the first sentence on ties
        if count > longest_count:
            longest, longest_count = sentence, count
    return longest


def analyze(text: str | None) -> TextStatistics:
    """Compute the full set of statistics for the text.

    Args:
        text: The input text. None is treated like an empty string.

    Returns:
        A new TextStatistics record. All counts are zero and all strings
        empty when the text is empty.
    """
    if not text:
        return TextStatistics.empty()

    _logger.debug("Analyzing %d characters", len(text))

    chars = count_characters(text)
    words = extract_words(text)
    word_counts = Counter(words)
    sentences = split_sentences(text)

    word_count = len(words)
    sentence_count = len(sentences)

    return TextStatistics(
        characters_with_spaces=chars.total,
        characters_without_spaces=chars.total - chars.whitespace,
        letters=chars.letters,
        digits=chars.digits,
        punctuation=chars.punctuation,
        word_count=word_count,
        unique_word_count=len(word_counts),
        most_common_word=_most_common_word(word_counts),
        average_word_length=(
            sum(len(word) for word in words) / word_count if word_count else 0.0
        ),
        longest_word=_longest_word(words),
        shortest_word=_shortest_word(words),
        sentence_count=sentence_count,
        average_words_per_sentence=(
            word_count / sentence_count if sentence_count else 0.0
        ),
        longest_sentence=_longest_sentence(sentences),
    )
