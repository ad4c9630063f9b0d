"""
Record and result models.

Four record kinds are searchable: Faculty, Paper, Patent, Project. The
backend serves them with camelCase field names (researchInterests,
aiKeywords, patentNumber, leadFaculty, ...); the models expose snake_case
attributes and accept either form on input.

A SearchResult is a tagged union discriminated on ``type``:
    FacultyResult | PaperResult | PatentResult | ProjectResult

Public API:
    Faculty, Paper, Patent, Project, Record
    Dataset
    SearchResult (+ the four variants), RESULT_TYPES
    confidence_label(confidence) → str
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticUndefined


class _Wire(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_missing(cls, value: Any, info: ValidationInfo) -> Any:
        # Blank backend fields arrive as null; required fields stay null and fail
        if value is not None:
            return value
        default = cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value if default is PydanticUndefined else default


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class Faculty(_Wire):
    id: str
    name: str
    title: str = ""
    department: str = ""
    email: str = ""
    phone: str = ""
    photo: str = ""
    bio: str = ""
    research_interests: list[str] = Field(default_factory=list)
    ai_keywords: list[str] = Field(default_factory=list)


class Paper(_Wire):
    id: str
    title: str
    authors: list[str] = Field(default_factory=list)
    year: int = 0
    abstract: str = ""
    link: str = ""
    ai_keywords: list[str] = Field(default_factory=list)


class Patent(_Wire):
    id: str
    title: str
    inventors: list[str] = Field(default_factory=list)
    patent_number: str = ""
    year: int = 0
    description: str = ""
    link: str = ""
    ai_keywords: list[str] = Field(default_factory=list)


class Project(_Wire):
    id: str
    title: str
    lead_faculty: list[str] = Field(default_factory=list)
    status: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str | None = None
    ai_keywords: list[str] = Field(default_factory=list)


Record = Faculty | Paper | Patent | Project


class Dataset(_Wire):
    """The four-collection bundle currently active for search."""

    faculty: list[Faculty] = Field(default_factory=list)
    papers: list[Paper] = Field(default_factory=list)
    patents: list[Patent] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "faculty":  len(self.faculty),
            "papers":   len(self.papers),
            "patents":  len(self.patents),
            "projects": len(self.projects),
        }


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class _ResultBase(_Wire):
    confidence: int = Field(ge=0, le=100)
    ai_justification: str
    matched_keywords: list[str] = Field(default_factory=list)


class FacultyResult(_ResultBase):
    type: Literal["faculty"] = "faculty"
    data: Faculty


class PaperResult(_ResultBase):
    type: Literal["paper"] = "paper"
    data: Paper


class PatentResult(_ResultBase):
    type: Literal["patent"] = "patent"
    data: Patent


class ProjectResult(_ResultBase):
    type: Literal["project"] = "project"
    data: Project


SearchResult = Annotated[
    Union[FacultyResult, PaperResult, PatentResult, ProjectResult],
    Field(discriminator="type"),
]

RESULT_TYPES = ("faculty", "paper", "patent", "project")


def confidence_label(confidence: int) -> str:
    """Badge text shown next to a result's confidence."""
    if confidence >= 80:
        return "High Match"
    if confidence >= 60:
        return "Good Match"
    return "Moderate Match"
