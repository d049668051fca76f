"""Text analytics package.

This package provides tools for:
1. Computing character, word and sentence statistics (analyzer module)
2. Reading text from files, stdin and URLs (sources module)
3. Rendering statistics as a report or JSON (report module)

Example usage:
    from text_analytics.analyzer import analyze, analyze_text
    from text_analytics.report import format_statistics

    stats = analyze("Jeden dwa Dwa trzy Trzy Trzy")
    print(stats.unique_word_count)  # 3
    print(stats.most_common_word)  # "trzy"

    counts = analyze_text("hello world hello")
    print(counts["hello"])  # 2
"""

from __future__ import annotations
