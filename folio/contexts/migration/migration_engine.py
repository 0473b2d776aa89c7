"""
DSL Migration Engine

Upgrades resume DSL documents across schema versions using a registry of
single-step migrators keyed by source version.

The registry is a directed map ``from_version -> Migrator``. Migration walks it
iteratively from the document's version to the target, tracking visited
versions so that a cycle fails fast instead of looping. Every applied step is
checked against the migrator's declared ``to_version``.

Examples:
    >>> engine = MigrationEngine()
    >>> engine.register_migrators([
    ...     Migrator("1.0.0", "2.0.0", upgrade_to_v2),
    ...     Migrator("2.0.0", "3.0.0", upgrade_to_v3),
    ... ])
    >>> engine.get_migration_path("1.0.0", "3.0.0")
    ['1.0.0', '2.0.0', '3.0.0']
    >>> engine.migrate(dsl_v1, "3.0.0").version
    '3.0.0'
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Sequence

from folio.contexts.migration.exceptions import (
    CircularMigrationError,
    MigrationContractViolationError,
    MigrationError,
    MigratorRegistrationError,
    NoMigrationPathError,
)
from folio.contexts.migration.logger import (
    log_migration_failure,
    log_migration_result,
    log_migration_step,
)
from folio.contexts.schema.dsl_data_structure import ResumeDsl


@dataclass(frozen=True)
class Migrator:
    """
    A single-step, pure transform from one schema version to its successor.

    Attributes:
        from_version: Version this migrator accepts
        to_version: Version every returned document must carry
        migrate: Transform producing a new document (input is not mutated)
    """

    from_version: str
    to_version: str
    migrate: Callable[[ResumeDsl], ResumeDsl]


class MigrationEngine:
    """Registry of migrators and the traversal over it."""

    def __init__(self):
        self._migrators: Dict[str, Migrator] = {}

    def register_migrators(self, migrators: Sequence[Migrator]) -> None:
        """
        Register migrators keyed by source version.

        The batch is all-or-nothing: nothing is registered if any entry clashes.

        Raises:
            MigratorRegistrationError: If a source version is already registered
                (either earlier in this call or by a previous call)
        """
        batch: Dict[str, Migrator] = {}
        for migrator in migrators:
            if migrator.from_version in self._migrators or migrator.from_version in batch:
                raise MigratorRegistrationError(migrator.from_version)
            batch[migrator.from_version] = migrator

        self._migrators.update(batch)

    def registered_versions(self) -> List[str]:
        """Source versions with a registered migrator, in registration order."""
        return list(self._migrators)

    def _traverse(self, from_version: str, target_version: str) -> Iterator[Migrator]:
        """
        Yield the migrators leading from from_version to target_version.

        Lazy: a missing link or cycle is raised only when the traversal reaches it,
        so callers applying each step see failures in step order.
        """
        visited: List[str] = []
        current = from_version

        while current != target_version:
            migrator = self._migrators.get(current)
            if migrator is None:
                raise NoMigrationPathError(current, target_version)
            if current in visited:
                raise CircularMigrationError(current, visited)

            visited.append(current)
            yield migrator
            current = migrator.to_version

    def migrate(self, dsl: ResumeDsl, target_version: str) -> ResumeDsl:
        """
        Migrate a document to target_version.

        Returns the input unchanged when it is already at the target.

        Raises:
            NoMigrationPathError: A version on the way has no migrator
            CircularMigrationError: The traversal revisits a version
            MigrationContractViolationError: A migrator returned the wrong version
        """
        if dsl.version == target_version:
            return dsl

        path = [dsl.version]
        current = dsl

        try:
            for migrator in self._traverse(dsl.version, target_version):
                log_migration_step(migrator.from_version, migrator.to_version)
                result = migrator.migrate(current)

                if result.version != migrator.to_version:
                    raise MigrationContractViolationError(
                        migrator.from_version, migrator.to_version, result.version
                    )

                current = result
                path.append(result.version)
        except MigrationError as e:
            log_migration_failure(e)
            raise

        log_migration_result(path)
        return current

    def can_migrate(self, from_version: str, to_version: str) -> bool:
        """True if a migration path exists (no missing link, no cycle)."""
        try:
            for _ in self._traverse(from_version, to_version):
                pass
        except (NoMigrationPathError, CircularMigrationError):
            return False
        return True

    def get_migration_path(self, from_version: str, to_version: str) -> List[str]:
        """
        Versions visited from from_version to to_version, both ends included.

        Raises:
            NoMigrationPathError: A version on the way has no migrator
            CircularMigrationError: The traversal revisits a version
        """
        path = [from_version]
        for migrator in self._traverse(from_version, to_version):
            path.append(migrator.to_version)
        return path
