"""
Resume Record Data Structures

Defines the persisted resume sub-entities the section compilers read:
experiences, education, skills, languages, projects, certifications, awards,
recommendations and interests, plus the resume itself (ownership, public slug,
stored theme and custom DSL documents).

Records are produced by the storage collaborator (see rendering/storage.py).
``from_dict`` constructors accept plain mappings as loaded from YAML or JSON,
with dates either as date objects or ISO 8601 strings.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Dict, List, Optional


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _known_fields(cls, data: Dict[str, Any]) -> Dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in data.items() if key in names}


@dataclass
class ExperienceRecord:
    id: str
    company: str
    position: str
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    location: Optional[str] = None
    description: Optional[str] = None
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExperienceRecord":
        values = _known_fields(cls, data)
        values["start_date"] = _parse_date(values.get("start_date"))
        values["end_date"] = _parse_date(values.get("end_date"))
        values["skills"] = list(values.get("skills") or [])
        return cls(**values)


@dataclass
class EducationRecord:
    id: str
    institution: str
    degree: str
    field: str
    start_date: date
    end_date: Optional[date] = None
    is_current: bool = False
    location: Optional[str] = None
    description: Optional[str] = None
    gpa: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationRecord":
        values = _known_fields(cls, data)
        values["start_date"] = _parse_date(values.get("start_date"))
        values["end_date"] = _parse_date(values.get("end_date"))
        return cls(**values)


@dataclass
class SkillRecord:
    """A skill with an optional numeric level (1-5 scale, higher is stronger)."""

    id: str
    name: str
    category: str
    level: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillRecord":
        return cls(**_known_fields(cls, data))


@dataclass
class LanguageRecord:
    id: str
    name: str
    level: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageRecord":
        return cls(**_known_fields(cls, data))


@dataclass
class ProjectRecord:
    id: str
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: bool = False
    technologies: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectRecord":
        values = _known_fields(cls, data)
        values["start_date"] = _parse_date(values.get("start_date"))
        values["end_date"] = _parse_date(values.get("end_date"))
        values["technologies"] = list(values.get("technologies") or [])
        return cls(**values)


@dataclass
class CertificationRecord:
    id: str
    name: str
    issuer: str
    issue_date: date
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CertificationRecord":
        values = _known_fields(cls, data)
        values["issue_date"] = _parse_date(values.get("issue_date"))
        values["expiry_date"] = _parse_date(values.get("expiry_date"))
        return cls(**values)


@dataclass
class AwardRecord:
    id: str
    title: str
    issuer: str
    date: date
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AwardRecord":
        values = _known_fields(cls, data)
        values["date"] = _parse_date(values.get("date"))
        return cls(**values)


@dataclass
class RecommendationRecord:
    id: str
    author: str
    content: str
    position: Optional[str] = None
    company: Optional[str] = None
    date: Optional[date] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecommendationRecord":
        values = _known_fields(cls, data)
        values["date"] = _parse_date(values.get("date"))
        return cls(**values)


@dataclass
class InterestRecord:
    id: str
    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InterestRecord":
        return cls(**_known_fields(cls, data))


@dataclass
class ResumeRecord:
    """
    A persisted resume with its sub-entities and stored DSL documents.

    Attributes:
        id: Resume identifier
        user_id: Owner identifier
        slug: Public slug (None when never published)
        is_public: Whether the resume may be rendered by slug
        summary: Free-text professional summary
        theme_dsl: DSL document of the resume's active theme (base layer)
        custom_dsl: Owner customizations layered over the theme
    """

    id: str
    user_id: str
    slug: Optional[str] = None
    is_public: bool = False
    summary: Optional[str] = None
    theme_dsl: Dict[str, Any] = field(default_factory=dict)
    custom_dsl: Dict[str, Any] = field(default_factory=dict)
    experiences: List[ExperienceRecord] = field(default_factory=list)
    education: List[EducationRecord] = field(default_factory=list)
    skills: List[SkillRecord] = field(default_factory=list)
    languages: List[LanguageRecord] = field(default_factory=list)
    projects: List[ProjectRecord] = field(default_factory=list)
    certifications: List[CertificationRecord] = field(default_factory=list)
    awards: List[AwardRecord] = field(default_factory=list)
    recommendations: List[RecommendationRecord] = field(default_factory=list)
    interests: List[InterestRecord] = field(default_factory=list)

    # Collection attribute -> record class, used by from_dict
    _collections = {
        "experiences": ExperienceRecord,
        "education": EducationRecord,
        "skills": SkillRecord,
        "languages": LanguageRecord,
        "projects": ProjectRecord,
        "certifications": CertificationRecord,
        "awards": AwardRecord,
        "recommendations": RecommendationRecord,
        "interests": InterestRecord,
    }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeRecord":
        """
        Build a record from a plain mapping.

        Raises:
            KeyError: If id or user_id is missing
        """
        values = {
            "id": str(data["id"]),
            "user_id": str(data["user_id"]),
            "slug": data.get("slug"),
            "is_public": bool(data.get("is_public", False)),
            "summary": data.get("summary"),
            "theme_dsl": dict(data.get("theme_dsl") or {}),
            "custom_dsl": dict(data.get("custom_dsl") or {}),
        }
        for name, record_cls in cls._collections.items():
            values[name] = [record_cls.from_dict(item) for item in data.get(name) or []]
        return cls(**values)
