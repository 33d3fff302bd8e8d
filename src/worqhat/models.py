"""
Typed values passed to request builders.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Union


class Orientation(str, Enum):
    """Orientation of a generated image."""

    SQUARE = "square"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class OutputType(str, Enum):
    """Delivery format of a generated image."""

    URL = "url"
    BLOB = "blob"


@dataclass(frozen=True)
class ArrayAdd:
    """Append elements to an array field."""

    elements: Any


@dataclass(frozen=True)
class ArrayRemove:
    """Remove elements from an array field."""

    elements: Any


@dataclass(frozen=True)
class Increment:
    """Increment a numeric field by ``amount``."""

    amount: Union[int, float]


UpdateOperation = Union[ArrayAdd, ArrayRemove, Increment]


@dataclass(frozen=True)
class WhereClause:
    """
    One condition of a collection query.

    Attributes:
        field: Column the condition applies to
        operator: Comparison operator understood by the server ("==", ">", ...)
        value: Value compared against

    Example:
        >>> WhereClause("age", ">", 21).to_dict()
        {'field': 'age', 'operator': '>', 'value': 21}
    """

    field: str
    operator: str
    value: Any

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def clauses_to_payload(clauses: List[WhereClause]) -> List[Dict[str, Any]]:
    return [clause.to_dict() for clause in clauses]
