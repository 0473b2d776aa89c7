"""
Migration Context

Responsibilities:
- Registers single-step migrators keyed by source version
- Upgrades documents to a target version, detecting cycles and missing links
- Verifies each migrator honours its declared target version

Owns: Migrator registry, version traversal
Never: Validates document structure or compiles documents
"""

from folio.contexts.migration.exceptions import (
    CircularMigrationError,
    MigrationContractViolationError,
    MigrationError,
    MigratorRegistrationError,
    NoMigrationPathError,
)
from folio.contexts.migration.migration_engine import MigrationEngine, Migrator
from folio.contexts.migration.migrators import create_migration_engine, default_migrators

__all__ = [
    "MigrationEngine",
    "Migrator",
    "create_migration_engine",
    "default_migrators",
    "MigrationError",
    "NoMigrationPathError",
    "CircularMigrationError",
    "MigrationContractViolationError",
    "MigratorRegistrationError",
]
