"""
Generic repository: the only layer that builds ORM queries.

Filters are expressed as an explicit (field, comparison, values) triple
and turned into a SQLAlchemy condition by ``build_condition``.  Writes
are flushed but never committed; the calling service owns the
transaction.
"""

import enum
import logging
from typing import Any, Generic, TypeVar

from empresa.extensions import db

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=db.Model)


class Comparison(enum.Enum):
    """Comparison operators supported by ``build_condition``."""

    EQ = "eq"
    GT = "gt"  # strict
    LT = "lt"  # strict
    BETWEEN = "between"  # inclusive on both bounds


# Number of operand values each comparison expects.
_ARITY = {
    Comparison.EQ: 1,
    Comparison.GT: 1,
    Comparison.LT: 1,
    Comparison.BETWEEN: 2,
}


def build_condition(column, comparison: Comparison, *values: Any):
    """
    Build a SQL condition comparing ``column`` against ``values``.

    Args:
        column:     A mapped column attribute (e.g. ``Jefe.salario``).
        comparison: The operator to apply.
        values:     One operand, or two for ``BETWEEN`` (low, high).

    Returns:
        A SQLAlchemy boolean clause usable in ``Query.filter``.

    Raises:
        ValueError: If the number of values does not match the operator.
    """
    expected = _ARITY[comparison]
    if len(values) != expected:
        raise ValueError(
            f"{comparison.name} expects {expected} value(s), got {len(values)}"
        )

    if comparison is Comparison.EQ:
        return column == values[0]
    if comparison is Comparison.GT:
        return column > values[0]
    if comparison is Comparison.LT:
        return column < values[0]
    low, high = values
    return column.between(low, high)


class Repository(Generic[ModelT]):
    """
    CRUD and filtered lookups for a single mapped model.

    Results are always ordered by primary key so list responses are
    stable across requests.
    """

    def __init__(self, model: type[ModelT]):
        self.model = model

    @property
    def entity_type(self) -> str:
        """Dotted entity name used in audit entries and error messages."""
        return f"org.{self.model.__tablename__}"

    def find_all(self) -> list[ModelT]:
        return self.model.query.order_by(self.model.id).all()

    def find_by_id(self, entity_id: int) -> ModelT | None:
        return db.session.get(self.model, entity_id)

    def find_by(
        self, field: str, comparison: Comparison, *values: Any
    ) -> list[ModelT]:
        """
        Return every row whose ``field`` satisfies the comparison.

        Raises:
            ValueError: If ``field`` is not a column of the model.
        """
        if field not in self.model.__table__.columns:
            raise ValueError(
                f"{self.model.__name__} has no column named '{field}'"
            )
        column = getattr(self.model, field)
        return (
            self.model.query.filter(build_condition(column, comparison, *values))
            .order_by(self.model.id)
            .all()
        )

    def save(self, entity: ModelT) -> ModelT:
        """Insert or update ``entity`` and flush so its id is populated."""
        db.session.add(entity)
        db.session.flush()
        return entity

    def delete_by_id(self, entity_id: int) -> bool:
        """
        Delete the row with the given id.

        Returns:
            True if a row was deleted, False if none existed.
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            logger.debug("Delete skipped: %s %s does not exist", self.entity_type, entity_id)
            return False
        db.session.delete(entity)
        db.session.flush()
        return True
