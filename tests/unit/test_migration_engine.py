"""Unit tests for the migration engine and the built-in migrators."""

import pytest

from folio.contexts.migration import (
    CircularMigrationError,
    MigrationContractViolationError,
    MigrationEngine,
    Migrator,
    MigratorRegistrationError,
    NoMigrationPathError,
    create_migration_engine,
    default_migrators,
)
from folio.contexts.schema import CURRENT_DSL_VERSION, ResumeDsl


def make_dsl(version="1.0.0", sections=None, item_overrides=None):
    return ResumeDsl.model_validate(
        {
            "version": version,
            "layout": {"type": "single-column", "paperSize": "a4", "margins": "normal"},
            "tokens": {},
            "sections": sections
            or [{"id": "summary", "visible": True, "order": 0, "column": "main"}],
            "itemOverrides": item_overrides or {},
        }
    )


def to_v2(dsl):
    layout = dsl.layout.model_copy(update={"margins": "wide"})
    return dsl.model_copy(update={"version": "2.0.0", "layout": layout})


def to_v3(dsl):
    layout = dsl.layout.model_copy(update={"paper_size": "letter"})
    return dsl.model_copy(update={"version": "3.0.0", "layout": layout})


def chained_engine():
    engine = MigrationEngine()
    engine.register_migrators(
        [Migrator("1.0.0", "2.0.0", to_v2), Migrator("2.0.0", "3.0.0", to_v3)]
    )
    return engine


@pytest.mark.unit
def test_migrate_identity_at_target():
    """Test that a document already at the target is returned unchanged."""
    dsl = make_dsl("1.0.0")
    assert MigrationEngine().migrate(dsl, "1.0.0") is dsl


@pytest.mark.unit
def test_migrate_chain_equals_manual_application():
    """Test that chained migration matches applying each migrator by hand."""
    dsl = make_dsl("1.0.0")

    migrated = chained_engine().migrate(dsl, "3.0.0")

    assert migrated.version == "3.0.0"
    assert migrated == to_v3(to_v2(dsl))
    assert migrated.layout.margins == "wide"
    assert migrated.layout.paper_size == "letter"


@pytest.mark.unit
def test_migrate_does_not_mutate_input():
    dsl = make_dsl("1.0.0")
    chained_engine().migrate(dsl, "3.0.0")
    assert dsl.version == "1.0.0"
    assert dsl.layout.margins == "normal"


@pytest.mark.unit
def test_migrate_stops_at_intermediate_target():
    assert chained_engine().migrate(make_dsl("1.0.0"), "2.0.0").version == "2.0.0"


@pytest.mark.unit
def test_migrate_no_path():
    """Test that a missing link names the unreachable version and the target."""
    with pytest.raises(NoMigrationPathError) as exc_info:
        chained_engine().migrate(make_dsl("1.0.0"), "4.0.0")

    assert exc_info.value.version == "3.0.0"
    assert exc_info.value.target_version == "4.0.0"
    assert exc_info.value.status_code == 400


@pytest.mark.unit
def test_migrate_unknown_source_version():
    with pytest.raises(NoMigrationPathError) as exc_info:
        chained_engine().migrate(make_dsl("0.1.0"), "3.0.0")
    assert exc_info.value.version == "0.1.0"


@pytest.mark.unit
def test_migrate_circular():
    """Test that a cycle in the registry fails instead of looping."""
    engine = MigrationEngine()
    engine.register_migrators(
        [
            Migrator("1.0.0", "2.0.0", to_v2),
            Migrator("2.0.0", "1.0.0", lambda dsl: dsl.model_copy(update={"version": "1.0.0"})),
        ]
    )

    with pytest.raises(CircularMigrationError) as exc_info:
        engine.migrate(make_dsl("1.0.0"), "9.0.0")

    assert exc_info.value.version == "1.0.0"
    assert exc_info.value.path == ["1.0.0", "2.0.0"]


@pytest.mark.unit
def test_migrate_self_loop():
    """Test that a migrator mapping a version onto itself is reported as a cycle."""
    engine = MigrationEngine()
    engine.register_migrators([Migrator("1.0.0", "1.0.0", lambda dsl: dsl)])

    with pytest.raises(CircularMigrationError) as exc_info:
        engine.migrate(make_dsl("1.0.0"), "2.0.0")

    assert exc_info.value.version == "1.0.0"
    assert not engine.can_migrate("1.0.0", "2.0.0")


@pytest.mark.unit
def test_get_migration_path_circular():
    engine = MigrationEngine()
    engine.register_migrators(
        [Migrator("1.0.0", "2.0.0", to_v2), Migrator("2.0.0", "1.0.0", to_v2)]
    )

    with pytest.raises(CircularMigrationError) as exc_info:
        engine.get_migration_path("1.0.0", "3.0.0")

    assert exc_info.value.path == ["1.0.0", "2.0.0"]


@pytest.mark.unit
def test_migrate_contract_violation():
    """Test that a migrator returning the wrong version is rejected."""
    engine = MigrationEngine()
    engine.register_migrators(
        [Migrator("1.0.0", "2.0.0", lambda dsl: dsl.model_copy(update={"version": "2.5.0"}))]
    )

    with pytest.raises(MigrationContractViolationError) as exc_info:
        engine.migrate(make_dsl("1.0.0"), "2.0.0")

    assert exc_info.value.expected_version == "2.0.0"
    assert exc_info.value.actual_version == "2.5.0"


@pytest.mark.unit
def test_can_migrate():
    engine = chained_engine()

    assert engine.can_migrate("1.0.0", "3.0.0")
    assert engine.can_migrate("2.0.0", "3.0.0")
    assert engine.can_migrate("5.0.0", "5.0.0")
    assert not engine.can_migrate("1.0.0", "4.0.0")
    assert not engine.can_migrate("0.1.0", "1.0.0")


@pytest.mark.unit
def test_can_migrate_false_on_cycle():
    engine = MigrationEngine()
    engine.register_migrators(
        [Migrator("1.0.0", "2.0.0", to_v2), Migrator("2.0.0", "1.0.0", to_v2)]
    )
    assert not engine.can_migrate("1.0.0", "3.0.0")


@pytest.mark.unit
def test_get_migration_path():
    engine = chained_engine()

    assert engine.get_migration_path("1.0.0", "3.0.0") == ["1.0.0", "2.0.0", "3.0.0"]
    assert engine.get_migration_path("2.0.0", "2.0.0") == ["2.0.0"]

    with pytest.raises(NoMigrationPathError):
        engine.get_migration_path("1.0.0", "4.0.0")


@pytest.mark.unit
def test_register_duplicate_source_version():
    """Test that a second migrator for the same source version is a wiring error."""
    engine = chained_engine()

    with pytest.raises(MigratorRegistrationError) as exc_info:
        engine.register_migrators([Migrator("1.0.0", "9.0.0", to_v2)])

    assert exc_info.value.from_version == "1.0.0"
    assert engine.registered_versions() == ["1.0.0", "2.0.0"]


@pytest.mark.unit
def test_default_engine_reaches_current_version():
    engine = create_migration_engine()

    assert engine.registered_versions() == [m.from_version for m in default_migrators()]
    assert engine.get_migration_path("0.9.0", CURRENT_DSL_VERSION) == ["0.9.0", "1.0.0"]


@pytest.mark.unit
def test_legacy_migrator_renumbers_orders():
    """Test that 0.9.0 documents get dense 0-based section and override orders."""
    legacy = make_dsl(
        "0.9.0",
        sections=[
            {"id": "experience", "visible": True, "order": 20, "column": "main"},
            {"id": "summary", "visible": True, "order": 10, "column": "main"},
        ],
        item_overrides={
            "skills": [
                {"itemId": "sk-1", "order": 9},
                {"itemId": "sk-2", "order": 5},
                {"itemId": "sk-3", "visible": False},
            ]
        },
    )

    migrated = create_migration_engine().migrate(legacy, CURRENT_DSL_VERSION)

    assert migrated.version == "1.0.0"
    assert [(s.id, s.order) for s in migrated.sections] == [("summary", 0), ("experience", 1)]
    assert [(o.item_id, o.order) for o in migrated.item_overrides["skills"]] == [
        ("sk-1", 1),
        ("sk-2", 0),
        ("sk-3", None),
    ]


@pytest.mark.unit
@pytest.mark.parametrize(
    "batch",
    [
        [Migrator("3.0.0", "4.0.0", to_v2), Migrator("1.0.0", "9.0.0", to_v2)],
        [Migrator("3.0.0", "4.0.0", to_v2), Migrator("3.0.0", "5.0.0", to_v2)],
    ],
)
def test_register_batch_is_all_or_nothing(batch):
    """Test that a clash anywhere in a batch leaves the registry untouched."""
    engine = chained_engine()

    with pytest.raises(MigratorRegistrationError):
        engine.register_migrators(batch)

    assert engine.registered_versions() == ["1.0.0", "2.0.0"]
