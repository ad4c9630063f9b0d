"""One-sentence explanations of why a record matched a query."""

from discovery.models import Faculty, Paper, Patent, Project, Record


def _first_two(keywords: list[str], sep: str) -> str:
    return sep.join(keywords[:2])


def explain(type: str, matched_keywords: list[str], confidence: int, record: Record) -> str:
    """
    Build the justification string for a result.

    Pure: the same inputs always give the same sentence. When nothing matched
    on keywords (the confidence came from content hits alone) a generic
    sentence quoting only the keyword count is returned.
    """
    n = len(matched_keywords)
    if n == 0:
        return f"This result matches {n} keywords from your search query."

    if type == "faculty" and isinstance(record, Faculty):
        interests = " and ".join(record.research_interests[:2]) or "their research area"
        return (
            f"This faculty member's expertise in {interests} strongly aligns with your search. "
            f"Matched {n} relevant keywords including {_first_two(matched_keywords, ', ')}."
        )

    if type == "paper" and isinstance(record, Paper):
        return (
            f"This research paper directly addresses your query with {n} keyword matches. "
            f"The study focuses on {_first_two(matched_keywords, ' and ')}, "
            f"making it highly relevant to your search."
        )

    if type == "patent" and isinstance(record, Patent):
        return (
            f"This patent innovation relates to {_first_two(matched_keywords, ' and ')}. "
            f"The technology described shows strong alignment with your search criteria "
            f"across {n} keywords."
        )

    if type == "project" and isinstance(record, Project):
        status = record.status.lower() or "research"
        return (
            f"This {status} project focuses on {_first_two(matched_keywords, ' and ')}, "
            f"matching {n} of your search terms. The project objectives align well with your query."
        )

    return f"This result matches {n} keywords from your search query."
