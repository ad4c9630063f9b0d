"""
Collaborator matching for a faculty member.

Compares one faculty member's interests (AI keywords + research interests,
lower-cased) with every other faculty member and every project in the
dataset. Scores are deterministic:

    colleague  min(95, 50 + 12 * shared)   55 when the member has no interests
    project    min(95, 52 + 10 * overlap)

Both lists are sorted by score, highest first, with ties in dataset order.
"""

from pydantic import BaseModel

from discovery.models import Dataset, Faculty

MAX_MATCH_SCORE = 95


class ColleagueMatch(BaseModel):
    id: str
    name: str
    title: str
    department: str
    email: str
    research_interests: list[str]
    match_score: int
    match_reason: str
    shared_keywords: list[str]


class ProjectOpportunity(BaseModel):
    id: str
    title: str
    lead_faculty: list[str]
    description: str
    status: str
    relevance_score: int
    relevance_reason: str


def interests_of(faculty: Faculty) -> list[str]:
    """Unique lower-cased interests, first-seen order."""
    seen: list[str] = []
    for item in faculty.ai_keywords + faculty.research_interests:
        key = item.strip().lower()
        if key and key not in seen:
            seen.append(key)
    return seen


def _find(dataset: Dataset, faculty_id: str) -> Faculty:
    for f in dataset.faculty:
        if f.id == faculty_id:
            return f
    raise KeyError(faculty_id)


def match_colleagues(faculty_id: str, dataset: Dataset) -> list[ColleagueMatch]:
    me = _find(dataset, faculty_id)
    mine = interests_of(me)

    matches = []
    for other in dataset.faculty:
        if other.id == me.id:
            continue
        shared = [k for k in interests_of(other) if k in mine]
        score = 55 if not mine else 50 + 12 * len(shared)
        if shared:
            reason = f"Shared expertise in {', '.join(shared[:3])}."
        else:
            reason = f"Complementary expertise in {other.department or 'related fields'}."
        matches.append(ColleagueMatch(
            id=other.id,
            name=other.name,
            title=other.title,
            department=other.department,
            email=other.email,
            research_interests=other.research_interests,
            match_score=min(MAX_MATCH_SCORE, score),
            match_reason=reason,
            shared_keywords=shared,
        ))

    matches.sort(key=lambda m: m.match_score, reverse=True)
    return matches


def match_projects(faculty_id: str, dataset: Dataset) -> list[ProjectOpportunity]:
    mine = interests_of(_find(dataset, faculty_id))

    opportunities = []
    for project in dataset.projects:
        keywords = [k.lower() for k in project.ai_keywords]
        overlap = [k for k in keywords if k in mine]
        opportunities.append(ProjectOpportunity(
            id=project.id,
            title=project.title or "Untitled project",
            lead_faculty=project.lead_faculty,
            description=project.description,
            status=project.status or "active",
            relevance_score=min(MAX_MATCH_SCORE, 52 + 10 * len(overlap)),
            relevance_reason=(
                f"Keyword overlap: {', '.join(overlap[:3])}."
                if overlap else "Potential interdisciplinary fit."
            ),
        ))

    opportunities.sort(key=lambda o: o.relevance_score, reverse=True)
    return opportunities


def match_label(score: int) -> str:
    if score >= 80:
        return "Highly Compatible"
    if score >= 65:
        return "Good Match"
    return "Potential Match"
