"""
Section data compilers.

Turns a resume's stored records into the tagged section data the AST carries:

    {"type": "experience", "items": [{...}, ...]}
    {"type": "summary", "data": {"content": "..."}}

Each compiler applies the section's item overrides first, then maps each
surviving record to a plain dict. Dates are ISO 8601 strings (YYYY-MM-DD) and
optional keys are left out rather than set to None.

Sections with no records behind them (a theme preview, or an id the compiler
does not know) get placeholder data of the right shape.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from folio.contexts.compiling.overrides import apply_overrides
from folio.contexts.compiling.resume_data_structure import (
    AwardRecord,
    CertificationRecord,
    EducationRecord,
    ExperienceRecord,
    InterestRecord,
    LanguageRecord,
    ProjectRecord,
    RecommendationRecord,
    ResumeRecord,
    SkillRecord,
)
from folio.contexts.schema.dsl_data_structure import ItemOverride
from folio.utils.timestamp import to_iso_date

SectionData = Dict[str, Any]
Overrides = Optional[Sequence[ItemOverride]]

# Minimum numeric level -> rank name, checked top-down
SKILL_RANKS = [
    (5, "Expert"),
    (4, "Advanced"),
    (3, "Intermediate"),
    (2, "Elementary"),
]
LOWEST_SKILL_RANK = "Beginner"

TEXT_SECTION_TYPES = ("summary", "objective")
ITEM_SECTION_TYPES = (
    "experience",
    "education",
    "skills",
    "languages",
    "projects",
    "certifications",
    "awards",
    "interests",
    "references",
    "volunteer",
    "publications",
)


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}


def _date_range(start, end, is_current: bool) -> Dict[str, Any]:
    return _compact(
        {
            "start_date": to_iso_date(start),
            "end_date": to_iso_date(end),
            "is_current": is_current,
        }
    )


def _items(section_type: str, entries: List[Dict[str, Any]]) -> SectionData:
    return {"type": section_type, "items": entries}


def skill_rank(level: Optional[int]) -> Optional[str]:
    """
    Rank name for a numeric skill level.

    Returns None when the level is unset, so callers can omit the key.

    Examples:
        >>> skill_rank(5)
        'Expert'
        >>> skill_rank(1)
        'Beginner'
    """
    if level is None:
        return None
    for threshold, rank in SKILL_RANKS:
        if level >= threshold:
            return rank
    return LOWEST_SKILL_RANK


def compile_experience(
    records: Sequence[ExperienceRecord], overrides: Overrides = None
) -> SectionData:
    entries = []
    for record in apply_overrides(records, overrides):
        entries.append(
            _compact(
                {
                    "id": record.id,
                    "title": record.position,
                    "company": record.company,
                    "location": {"city": record.location} if record.location else None,
                    "date_range": _date_range(
                        record.start_date, record.end_date, record.is_current
                    ),
                    "description": record.description,
                    "achievements": [],
                    "skills": list(record.skills),
                }
            )
        )
    return _items("experience", entries)


def compile_education(
    records: Sequence[EducationRecord], overrides: Overrides = None
) -> SectionData:
    entries = []
    for record in apply_overrides(records, overrides):
        entries.append(
            _compact(
                {
                    "id": record.id,
                    "institution": record.institution,
                    "degree": record.degree,
                    "field_of_study": record.field,
                    "location": {"city": record.location} if record.location else None,
                    "date_range": _date_range(
                        record.start_date, record.end_date, record.is_current
                    ),
                    "grade": record.gpa,
                    "activities": [],
                }
            )
        )
    return _items("education", entries)


def compile_skills(records: Sequence[SkillRecord], overrides: Overrides = None) -> SectionData:
    entries = [
        _compact(
            {
                "id": record.id,
                "name": record.name,
                "level": skill_rank(record.level),
                "category": record.category,
            }
        )
        for record in apply_overrides(records, overrides)
    ]
    return _items("skills", entries)


def compile_languages(
    records: Sequence[LanguageRecord], overrides: Overrides = None
) -> SectionData:
    entries = [
        {"id": record.id, "name": record.name, "proficiency": record.level}
        for record in apply_overrides(records, overrides)
    ]
    return _items("languages", entries)


def compile_projects(records: Sequence[ProjectRecord], overrides: Overrides = None) -> SectionData:
    entries = []
    for record in apply_overrides(records, overrides):
        date_range = None
        if record.start_date is not None:
            date_range = _date_range(record.start_date, record.end_date, record.is_current)

        entries.append(
            _compact(
                {
                    "id": record.id,
                    "name": record.name,
                    "date_range": date_range,
                    "url": record.url,
                    "description": record.description,
                    "highlights": [],
                    "technologies": list(record.technologies),
                }
            )
        )
    return _items("projects", entries)


def compile_certifications(
    records: Sequence[CertificationRecord], overrides: Overrides = None
) -> SectionData:
    entries = [
        _compact(
            {
                "id": record.id,
                "name": record.name,
                "issuer": record.issuer,
                "date": to_iso_date(record.issue_date),
                "url": record.credential_url,
            }
        )
        for record in apply_overrides(records, overrides)
    ]
    return _items("certifications", entries)


def compile_awards(records: Sequence[AwardRecord], overrides: Overrides = None) -> SectionData:
    entries = [
        _compact(
            {
                "id": record.id,
                "title": record.title,
                "issuer": record.issuer,
                "date": to_iso_date(record.date),
                "description": record.description,
            }
        )
        for record in apply_overrides(records, overrides)
    ]
    return _items("awards", entries)


def compile_interests(
    records: Sequence[InterestRecord], overrides: Overrides = None
) -> SectionData:
    entries = [
        {
            "id": record.id,
            "name": record.name,
            "keywords": [record.description] if record.description else [],
        }
        for record in apply_overrides(records, overrides)
    ]
    return _items("interests", entries)


def compile_references(
    records: Sequence[RecommendationRecord], overrides: Overrides = None
) -> SectionData:
    entries = [
        _compact(
            {
                "id": record.id,
                "name": record.author,
                "role": record.position or "",
                "company": record.company,
            }
        )
        for record in apply_overrides(records, overrides)
    ]
    return _items("references", entries)


def compile_summary(summary: Optional[str]) -> SectionData:
    return {"type": "summary", "data": {"content": summary or ""}}


def get_placeholder_data(section_id: str) -> SectionData:
    """
    Empty section data of the right shape for a section id.

    Text sections get empty content, known item sections an empty item list,
    and anything else is typed "custom".
    """
    if section_id in TEXT_SECTION_TYPES:
        return {"type": section_id, "data": {"content": ""}}
    if section_id in ITEM_SECTION_TYPES:
        return _items(section_id, [])
    return _items("custom", [])


# Section id -> (ResumeRecord collection attribute, compiler)
SECTION_COMPILERS: Dict[str, Tuple[str, Callable[..., SectionData]]] = {
    "experience": ("experiences", compile_experience),
    "education": ("education", compile_education),
    "skills": ("skills", compile_skills),
    "languages": ("languages", compile_languages),
    "projects": ("projects", compile_projects),
    "certifications": ("certifications", compile_certifications),
    "awards": ("awards", compile_awards),
    "interests": ("interests", compile_interests),
    "references": ("recommendations", compile_references),
}


def compile_section_data(
    section_id: str, resume: ResumeRecord, overrides: Overrides = None
) -> SectionData:
    """
    Compile one section's data from a resume's records.

    Args:
        section_id: Section id from the DSL (e.g., "experience")
        resume: Stored resume with its sub-entities
        overrides: Item overrides for this section

    Returns:
        Tagged section data; placeholder data for ids with no compiler
    """
    if section_id == "summary":
        return compile_summary(resume.summary)

    entry = SECTION_COMPILERS.get(section_id)
    if entry is None:
        return get_placeholder_data(section_id)

    attribute, compiler = entry
    return compiler(getattr(resume, attribute), overrides)
