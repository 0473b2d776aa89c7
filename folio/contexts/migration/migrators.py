"""
Built-in migrators and engine wiring.

The set of migrators shipped with Folio is fixed and ordered; it is handed to
the engine once, when the process wires its services together.

Version history:
    0.9.0  Section and item-override orders were 1-based and could be sparse
    1.0.0  Orders are dense and 0-based
"""

from typing import List, Optional, Sequence

from folio.contexts.migration.migration_engine import MigrationEngine, Migrator
from folio.contexts.schema.dsl_data_structure import ItemOverride, ResumeDsl
from folio.utils.ordering import normalize_orders


def _renumber_overrides(overrides: List[ItemOverride]) -> List[ItemOverride]:
    # Overrides without an explicit order keep following the item's natural index
    ranked = normalize_orders([o for o in overrides if o.order is not None])
    new_orders = {override.item_id: override.order for override in ranked}
    return [
        o.model_copy(update={"order": new_orders[o.item_id]}) if o.item_id in new_orders else o
        for o in overrides
    ]


def migrate_0_9_0_to_1_0_0(dsl: ResumeDsl) -> ResumeDsl:
    """Renumber section and item-override orders densely from 0, keeping their relative order."""
    return dsl.model_copy(
        update={
            "version": "1.0.0",
            "sections": normalize_orders(dsl.sections),
            "item_overrides": {
                section_id: _renumber_overrides(overrides)
                for section_id, overrides in dsl.item_overrides.items()
            },
        }
    )


def default_migrators() -> List[Migrator]:
    """Migrators shipped with the package, oldest first."""
    return [
        Migrator(from_version="0.9.0", to_version="1.0.0", migrate=migrate_0_9_0_to_1_0_0),
    ]


def create_migration_engine(migrators: Optional[Sequence[Migrator]] = None) -> MigrationEngine:
    """
    Build an engine with the given migrators (defaults to the built-in set).

    Raises:
        MigratorRegistrationError: If two migrators share a source version
    """
    engine = MigrationEngine()
    engine.register_migrators(default_migrators() if migrators is None else migrators)
    return engine
