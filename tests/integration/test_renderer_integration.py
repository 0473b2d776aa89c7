"""
Integration tests for the rendering context - storage lookup, theme merging,
migration and compilation of stored resumes.
"""

from pathlib import Path

import pytest
from loguru import logger
from omegaconf import OmegaConf

from folio.contexts.compiling import ResumeRecord
from folio.contexts.migration import NoMigrationPathError
from folio.contexts.rendering import (
    DslRenderer,
    InMemoryResumeStore,
    RenderResult,
    ResumeForbiddenError,
    ResumeNotFoundError,
)
from folio.contexts.schema import DslValidationError

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def make_renderer():
    store = InMemoryResumeStore.from_yaml_dir(FIXTURES_PATH / "resumes")
    return DslRenderer(store=store)


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    logger.remove(handler_id)


class UnreachableStore:
    """Store that fails the test if the renderer touches it."""

    def find_owned(self, resume_id, user_id):
        raise AssertionError("preview must not read storage")

    def find_public(self, slug):
        raise AssertionError("preview must not read storage")


@pytest.mark.integration
def test_render_owned_resume():
    """Test rendering a stored resume with theme merge, records and overrides."""
    result = make_renderer().render("r-1", "u-1", "pdf")

    assert isinstance(result, RenderResult)
    assert result.resume_id == "r-1"

    ast = result.ast
    assert ast.meta.target == "pdf"
    # custom DSL widens the theme's margins
    assert ast.page.margin_left_mm == 25
    assert [(c.id, c.width_percentage) for c in ast.page.columns] == [("main", 70), ("sidebar", 30)]
    assert [(s.section_id, s.column_id) for s in ast.sections] == [
        ("summary", "main"),
        ("experience", "main"),
        ("skills", "sidebar"),
    ]

    summary = ast.get_section("summary").data
    assert summary["type"] == "summary"
    assert summary["data"]["content"] == "Backend engineer focused on data platforms."

    experience = ast.get_section("experience").data["items"][0]
    assert experience["title"] == "Senior Engineer"
    assert experience["location"] == {"city": "Berlin"}
    assert experience["date_range"] == {"start_date": "2021-03-01", "is_current": True}

    skills = ast.get_section("skills").data["items"]
    assert [skill["id"] for skill in skills] == ["sk-1", "sk-2", "sk-4"]
    assert [skill.get("level") for skill in skills] == ["Expert", "Intermediate", None]
    assert "level" not in skills[2]

    assert ast.sections[0].styles.title.border_bottom == "2px solid #0F766E"
    assert ast.global_styles.accent == "#0F766E"


@pytest.mark.integration
def test_render_other_users_resume_forbidden():
    with pytest.raises(ResumeForbiddenError):
        make_renderer().render("r-1", "u-2")


@pytest.mark.integration
def test_render_missing_resume_not_found():
    with pytest.raises(ResumeNotFoundError) as exc_info:
        make_renderer().render("r-404", "u-1")
    assert exc_info.value.status_code == 404


@pytest.mark.integration
def test_render_public_by_slug():
    result = make_renderer().render_public("jane-doe")

    assert result.resume_id == "r-1"
    assert result.ast.meta.target == "html"


@pytest.mark.integration
@pytest.mark.parametrize("slug", ["private-resume", "does-not-exist"])
def test_render_public_hidden_or_missing(slug):
    """Test that unpublished and unknown slugs both read as not found."""
    with pytest.raises(ResumeNotFoundError):
        make_renderer().render_public(slug)


@pytest.mark.integration
def test_render_migrates_legacy_dsl_without_writing_back():
    """Test that a 0.9.0 stored DSL is upgraded in memory only."""
    renderer = make_renderer()

    result = renderer.render("r-2", "u-2")

    assert result.ast.meta.version == "1.0.0"
    assert [(s.section_id, s.order) for s in result.ast.sections] == [
        ("education", 0),
        ("experience", 1),
    ]
    education = result.ast.get_section("education").data["items"][0]
    assert education["grade"] == "1.3"
    assert education["date_range"]["end_date"] == "2017-09-30"

    stored = renderer.store.find_owned("r-2", "u-2")
    assert stored.theme_dsl["version"] == "0.9.0"
    assert [s["order"] for s in stored.theme_dsl["sections"]] == [20, 10]


@pytest.mark.integration
def test_render_invalid_stored_dsl():
    store = InMemoryResumeStore(
        [ResumeRecord(id="r-9", user_id="u-9", theme_dsl={"layout": {"type": "two-column"}})]
    )

    with pytest.raises(DslValidationError) as exc_info:
        DslRenderer(store=store).render("r-9", "u-9")

    assert "version: Required" in exc_info.value.errors


@pytest.mark.integration
def test_render_unmigratable_stored_dsl():
    theme = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / "dsl" / "two_column.yaml"))
    theme["version"] = "0.5.0"
    store = InMemoryResumeStore([ResumeRecord(id="r-8", user_id="u-8", theme_dsl=theme)])

    with pytest.raises(NoMigrationPathError):
        DslRenderer(store=store).render("r-8", "u-8")


@pytest.mark.integration
def test_preview_never_touches_storage():
    document = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / "dsl" / "two_column.yaml"))

    ast = DslRenderer(store=UnreachableStore()).preview(document, "pdf")

    assert ast.sections[0].data == {"type": "skills", "items": []}


@pytest.mark.integration
def test_validate_reports_errors_or_none():
    renderer = DslRenderer()
    document = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / "dsl" / "two_column.yaml"))

    assert renderer.validate(document) == {"valid": True, "errors": None}

    del document["version"]
    result = renderer.validate(document)
    assert result["valid"] is False
    assert "version: Required" in result["errors"]


@pytest.mark.integration
def test_preview_logs_result(log_messages):
    document = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / "dsl" / "two_column.yaml"))

    DslRenderer().preview(document, "pdf")

    assert "[render] Rendering preview for pdf" in log_messages
    assert "[render] Rendered preview: 1 section(s), DSL v1.0.0" in log_messages


@pytest.mark.integration
def test_preview_logs_failure(log_messages):
    document = OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / "dsl" / "two_column.yaml"))
    del document["version"]

    with pytest.raises(DslValidationError):
        DslRenderer().preview(document)

    assert any(
        message.startswith("[render] Render of preview failed (DslValidationError)")
        for message in log_messages
    )
