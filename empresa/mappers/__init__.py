"""
Mapper package: converts between ORM entities and transfer objects.

No validation of business rules happens here; mappers only reshape data.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

SourceT = TypeVar("SourceT")
TargetT = TypeVar("TargetT")


def map_list(
    convert: Callable[[SourceT], TargetT], items: Iterable[SourceT]
) -> list[TargetT]:
    """Apply ``convert`` to every item, preserving order."""
    return [convert(item) for item in items]
