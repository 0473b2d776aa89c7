"""Custom exceptions for the migration context."""

from typing import List, Optional

from folio.contexts.schema.exceptions import ClientError


class MigrationError(ClientError):
    """Base class for failures while upgrading a document between versions."""


class NoMigrationPathError(MigrationError):
    """
    Raised when no migrator is registered for a version on the way to the target.

    Attributes:
        version: Version with no outgoing migrator
        target_version: Version the traversal was trying to reach
    """

    def __init__(self, version: str, target_version: str):
        self.version = version
        self.target_version = target_version
        super().__init__(
            f"No migration path from version {version} (target {target_version})"
        )


class CircularMigrationError(MigrationError):
    """
    Raised when a traversal revisits a version.

    Attributes:
        version: Version seen twice
        path: Versions visited before the repeat, in order
    """

    def __init__(self, version: str, path: Optional[List[str]] = None):
        self.version = version
        self.path = list(path or [])
        chain = " -> ".join(self.path + [version])
        super().__init__(f"Circular migration detected at version {version} ({chain})")


class MigrationContractViolationError(MigrationError):
    """
    Raised when a migrator returns a document whose version is not its declared target.

    Attributes:
        from_version: Migrator source version
        expected_version: Migrator's declared to_version
        actual_version: Version found on the returned document
    """

    def __init__(self, from_version: str, expected_version: str, actual_version: str):
        self.from_version = from_version
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"Migrator {from_version} -> {expected_version} produced version {actual_version}"
        )


class MigratorRegistrationError(ValueError):
    """
    Raised at wiring time when two migrators claim the same source version.

    Attributes:
        from_version: Duplicated source version
    """

    def __init__(self, from_version: str):
        self.from_version = from_version
        super().__init__(f"A migrator is already registered for version {from_version}")
