"""Presentation of analysis results as text tables and JSON."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from text_analytics.analyzer import most_common_words

if TYPE_CHECKING:
    from collections import Counter
    from collections.abc import Sequence

    from text_analytics.analyzer import TextStatistics

SENTENCE_PREVIEW_LENGTH = 100
LABEL_WIDTH = 30
VALUE_WIDTH = 10
RULE_WIDTH = 60


def _row(label: str, value: object) -> str:
    if isinstance(value, float):
        value = f"{value:.2f}"
    return f"{label:<{LABEL_WIDTH}} {value:>{VALUE_WIDTH}}"


def _preview(sentence: str) -> str:
    if len(sentence) <= SENTENCE_PREVIEW_LENGTH:
        return sentence
    return sentence[:SENTENCE_PREVIEW_LENGTH] + "..."


def format_statistics(stats: TextStatistics) -> str:
    """Format text statistics as a sectioned report.

    Args:
        stats: Statistics returned by the analyzer.

    Returns:
        Multi-line report with character, word and sentence sections.
    """
    lines = [
        "=" * RULE_WIDTH,
        "TEXT ANALYSIS RESULTS".center(RULE_WIDTH).rstrip(),
        "=" * RULE_WIDTH,
        "",
        "--- 1. CHARACTERS ---",
        _row("Characters (with spaces):", stats.characters_with_spaces),
        _row("Characters (without spaces):", stats.characters_without_spaces),
        _row("Letters:", stats.letters),
        _row("Digits:", stats.digits),
        _row("Punctuation:", stats.punctuation),
        "",
        "--- 2. WORDS ---",
        _row("Total words:", stats.word_count),
        _row("Unique words:", stats.unique_word_count),
        _row("Most common word:", stats.most_common_word),
        _row("Average word length:", stats.average_word_length),
        _row("Longest word:", stats.longest_word),
        _row("Shortest word:", stats.shortest_word),
        "",
        "--- 3. SENTENCES ---",
        _row("Sentences:", stats.sentence_count),
        _row("Average words per sentence:", stats.average_words_per_sentence),
        "Longest sentence:",
        "-" * RULE_WIDTH,
        f'"{_preview(stats.longest_sentence)}"',
        "-" * RULE_WIDTH,
    ]
    return "\n".join(lines)


def format_word_frequencies(
    word_counts: Counter[str],
    *,
    top_n: int | None = None,
) -> str:
    """Format word frequency results as a table.

    Args:
        word_counts: Counter object with word frequencies.
        top_n: If provided, only show the top N words.

    Returns:
        Formatted string table with results.
    """
    total_words = sum(word_counts.values())

    if total_words == 0:
        return "No words found in input."

    items = most_common_words(word_counts, top_n)

    max_word_len = max((len(word) for word, _ in items), default=0)
    max_word_len = max(max_word_len, 4)  # Minimum width for "Word" header

    max_count = max((count for _, count in items), default=0)
    count_width = max(len(str(max_count)), 5)  # Minimum width for "Count" header

    lines = []
    header = f"{'Word':<{max_word_len}}  {'Count':>{count_width}}  {'Percentage':>10}"
    lines.append(header)
    lines.append("-" * len(header))

    for word, count in items:
        percentage = (count / total_words) * 100
        lines.append(f"{word:<{max_word_len}}  {count:>{count_width}}  {percentage:>9.2f}%")

    return "\n".join(lines)


def statistics_to_json(
    stats: TextStatistics,
    *,
    top_words: Sequence[tuple[str, int]] | None = None,
) -> str:
    """Serialize text statistics to indented JSON.

    Args:
        stats: Statistics returned by the analyzer.
        top_words: If provided, (word, count) pairs stored under "top_words".

    Returns:
        JSON object keyed by field name, non-ASCII characters preserved.
    """
    data = stats.to_dict()
    if top_words is not None:
        data["top_words"] = [
            {"word": word, "count": count} for word, count in top_words
        ]
    return json.dumps(data, ensure_ascii=False, indent=2)
