"""
Keyword relevance scorer.

A query is lower-cased, split on whitespace, and terms of length <= 2 are
dropped. Each remaining term is scored against one record:

    keyword overlap     +30 per (term, keyword) pair where either string
                        contains the other; the keyword joins matched_keywords
    content containment +15 per term found anywhere in the content text

confidence = min(100, raw score). Matching is plain substring containment in
both directions, so "ai" matches "rain"; that imprecision is accepted.

Public API:
    tokenize(query) → list[str]
    score(query_terms, ai_keywords, content_text) → Score
"""

from typing import NamedTuple

KEYWORD_WEIGHT = 30
CONTENT_WEIGHT = 15
MIN_TERM_LENGTH = 3
MAX_CONFIDENCE = 100


class Score(NamedTuple):
    confidence: int
    matched_keywords: list[str]


def tokenize(query: str) -> list[str]:
    return [t for t in query.lower().split() if len(t) >= MIN_TERM_LENGTH]


def score(query_terms: list[str], ai_keywords: list[str], content_text: str) -> Score:
    """Score one record. Never filters: callers drop zero-confidence records."""
    terms    = [t.lower() for t in query_terms]
    keywords = [k.lower() for k in ai_keywords]
    content  = content_text.lower()

    raw = 0
    matched: list[str] = []

    for term in terms:
        for keyword in keywords:
            if term in keyword or keyword in term:
                raw += KEYWORD_WEIGHT
                if keyword not in matched:
                    matched.append(keyword)

    for term in terms:
        if term in content:
            raw += CONTENT_WEIGHT

    return Score(min(MAX_CONFIDENCE, raw), matched)
