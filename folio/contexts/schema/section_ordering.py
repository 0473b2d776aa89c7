"""Section reordering for DSL documents."""

from folio.contexts.schema.dsl_data_structure import ResumeDsl
from folio.utils.ordering import move_item


def move_section(dsl: ResumeDsl, from_index: int, to_index: int) -> ResumeDsl:
    """
    Return a new document with one section moved and all orders renumbered.

    Indices refer to the sections' current display order (ascending ``order``),
    not to their position in the ``sections`` list.

    Raises:
        IndexError: If either index is out of range
    """
    return dsl.model_copy(update={"sections": move_item(dsl.sections, from_index, to_index)})
