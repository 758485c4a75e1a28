"""Query matching for finder results.

Substring matches win and keep a stable order (earlier match, shorter
label). Only when nothing contains the query verbatim do we fall back to a
subsequence score that rewards consecutive runs and word-boundary hits.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterator, Sequence

BOUNDARY_CHARS = "/_- ."


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``candidate`` as a case-insensitive subsequence match of ``query``.

    Returns ``None`` when some query character cannot be matched in order.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            run = 0
            score -= min(40, (idx - prev_idx - 1) * 2)
        if idx == 0 or candidate_folded[idx - 1] in BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def match_labels(query: str, labels: Sequence[str], limit: int) -> list[str]:
    """Return up to ``limit`` labels matching ``query``, best first.

    An empty query keeps the input order.
    """
    max_results = max(1, limit)
    if not query:
        return list(labels[:max_results])
    query_folded = query.casefold()

    def substring_hits() -> Iterator[tuple[int, int, str]]:
        for label in labels:
            idx = label.casefold().find(query_folded)
            if idx >= 0:
                yield (idx, len(label), label)

    substring = heapq.nsmallest(max_results, substring_hits())
    if substring:
        return [label for _idx, _length, label in substring]

    scored: list[tuple[int, int, str]] = []
    for label in labels:
        score = fuzzy_score(query, label)
        if score is not None:
            scored.append((-score, len(label), label))
    scored.sort()
    return [label for _score, _length, label in scored[:max_results]]


__all__ = ["fuzzy_score", "match_labels"]
