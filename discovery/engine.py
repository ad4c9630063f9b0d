"""
Keyword relevance search over the active dataset.

Every record in every collection is scored against the tokenised query
(discovery/scorer.py). Records with confidence > 0 become tagged results,
each annotated with a justification sentence (discovery/justification.py).

Ordering is a stable sort on confidence, highest first. Ties keep
collection order (faculty, papers, patents, projects) and, inside a
collection, the dataset's original order.

Public API:
    SearchEngine(context)
    SearchEngine.search(query) → list[SearchResult]     (coroutine)
    filter_results(results, types) → list[SearchResult]
    search(query)  : shortcut bound to the default dataset context
"""

from collections.abc import Callable, Iterable
from typing import Any

from discovery.justification import explain
from discovery.models import (
    Faculty,
    FacultyResult,
    Paper,
    PaperResult,
    Patent,
    PatentResult,
    Project,
    ProjectResult,
    SearchResult,
)
from discovery.scorer import score, tokenize
from etl.public_data import DatasetContext, default_context


def _join(*parts: str | list[str]) -> str:
    return " ".join(" ".join(p) if isinstance(p, list) else p for p in parts)


def faculty_text(f: Faculty) -> str:
    return _join(f.name, f.title, f.department, f.bio, f.research_interests)


def paper_text(p: Paper) -> str:
    return _join(p.title, p.abstract, p.authors)


def patent_text(p: Patent) -> str:
    return _join(p.title, p.description, p.inventors)


def project_text(p: Project) -> str:
    return _join(p.title, p.description, p.lead_faculty)


# (result type, dataset attribute, content builder, result model), in ranking-tie order
_COLLECTIONS: tuple[tuple[str, str, Callable[[Any], str], type], ...] = (
    ("faculty", "faculty",  faculty_text, FacultyResult),
    ("paper",   "papers",   paper_text,   PaperResult),
    ("patent",  "patents",  patent_text,  PatentResult),
    ("project", "projects", project_text, ProjectResult),
)


class SearchEngine:
    def __init__(self, context: DatasetContext):
        self.context = context

    async def search(self, query: str) -> list[SearchResult]:
        """
        Rank every record in the active dataset against query.

        Returns [] for an empty or whitespace-only query without reading the
        dataset. The dataset is read once per call, so a concurrent set() on
        the context takes effect on the next search.
        """
        if not query.strip():
            return []

        terms = tokenize(query)
        dataset = self.context.get()
        results: list[SearchResult] = []

        for kind, attr, to_text, result_model in _COLLECTIONS:
            for record in getattr(dataset, attr):
                confidence, matched = score(terms, record.ai_keywords, to_text(record))
                if confidence <= 0:
                    continue
                results.append(result_model(
                    data=record,
                    confidence=confidence,
                    ai_justification=explain(kind, matched, confidence, record),
                    matched_keywords=matched,
                ))

        # list.sort is stable: ties keep insertion order
        results.sort(key=lambda r: r.confidence, reverse=True)
        return results


def filter_results(results: list[SearchResult], types: Iterable[str] | None) -> list[SearchResult]:
    """Keep only results whose type is in types; None keeps everything."""
    if types is None:
        return list(results)
    wanted = set(types)
    return [r for r in results if r.type in wanted]


_default_engine = SearchEngine(default_context)


async def search(query: str) -> list[SearchResult]:
    return await _default_engine.search(query)
