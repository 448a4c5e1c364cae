"""Generic best-line selection by additive scoring rules.

A rule looks at one candidate line (with the full line list available for
positional context) and returns a score contribution, or ``None`` to
disqualify the line outright. :func:`best_line` keeps the first line that
reaches the highest total and returns it only if that total clears the
caller's threshold.
"""

import re
from collections.abc import Callable, Sequence

from .lines import neighbours

ScoreRule = Callable[[Sequence[str], int], float | None]


def _keyword_regex(keyword: str, whole_word: bool) -> re.Pattern[str]:
    escaped = re.escape(keyword)
    if whole_word:
        escaped = rf"(?<![A-Z0-9]){escaped}(?![A-Z0-9])"
    return re.compile(escaped, re.IGNORECASE)


def keyword_hits(
    keywords: Sequence[str],
    weight: float = 5.0,
    required: bool = False,
    whole_word: bool = False,
) -> ScoreRule:
    """Add ``weight`` for each keyword present on the line.

    Args:
        keywords: Keywords to look for (case-insensitive).
        weight: Contribution per keyword found.
        required: Disqualify lines containing none of the keywords.
        whole_word: Only count keywords not embedded in a longer token.
    """
    compiled = [_keyword_regex(k, whole_word) for k in keywords]

    def rule(lines: Sequence[str], index: int) -> float | None:
        hits = sum(1 for pattern in compiled if pattern.search(lines[index]))
        if required and hits == 0:
            return None
        return hits * weight

    return rule


def reject_matching(pattern: re.Pattern[str]) -> ScoreRule:
    """Disqualify lines on which ``pattern`` matches."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        return None if pattern.search(lines[index]) else 0.0

    return rule


def reject_digits() -> ScoreRule:
    """Disqualify lines containing any digit."""
    return reject_matching(re.compile(r"\d"))


def min_length(length: int) -> ScoreRule:
    """Disqualify lines shorter than ``length`` characters."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        return None if len(lines[index]) < length else 0.0

    return rule


def length_bands(bands: Sequence[tuple[int, float]]) -> ScoreRule:
    """Add the bonus of every ``(threshold, bonus)`` band the line is longer than."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        size = len(lines[index])
        return sum(bonus for threshold, bonus in bands if size > threshold)

    return rule


def scaled_length(divisor: float, cap: float) -> ScoreRule:
    """Add ``len(line) / divisor``, capped at ``cap``."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        return min(len(lines[index]) / divisor, cap)

    return rule


def uppercase_bonus(weight: float) -> ScoreRule:
    """Add ``weight`` when the line is entirely upper case."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        line = lines[index]
        return weight if line == line.upper() else 0.0

    return rule


def nearby_match(
    pattern: re.Pattern[str], weight: float, window: int = 1
) -> ScoreRule:
    """Add ``weight`` once if ``pattern`` matches the line or one within ``window``."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        context = [lines[index], *neighbours(list(lines), index, window)]
        return weight if any(pattern.search(line) for line in context) else 0.0

    return rule


def line_matching(pattern: re.Pattern[str], weight: float) -> ScoreRule:
    """Add ``weight`` when ``pattern`` matches the line itself."""

    def rule(lines: Sequence[str], index: int) -> float | None:
        return weight if pattern.search(lines[index]) else 0.0

    return rule


def score_line(
    lines: Sequence[str], index: int, rules: Sequence[ScoreRule]
) -> float | None:
    """Sum every rule's contribution for ``lines[index]``.

    Returns:
        The total score, or ``None`` as soon as any rule disqualifies the line.
    """
    total = 0.0
    for rule in rules:
        contribution = rule(lines, index)
        if contribution is None:
            return None
        total += contribution
    return total


def best_line(
    lines: Sequence[str], rules: Sequence[ScoreRule], min_score: float
) -> str | None:
    """Return the highest-scoring line if its score reaches ``min_score``.

    Lines are scanned top to bottom and only a strictly higher score
    replaces the current best, so the earliest line wins ties.
    """
    best: str | None = None
    best_score: float | None = None

    for index, line in enumerate(lines):
        score = score_line(lines, index, rules)
        if score is None:
            continue
        if best_score is None or score > best_score:
            best, best_score = line, score

    if best is None or best_score is None or best_score < min_score:
        return None
    return best
