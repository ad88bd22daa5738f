"""
Lookup criteria for the users table.

A lookup is a conjunction of equality predicates.  Each predicate names
its column through ``UserField`` so that column names never come from
the request; only the compared values do, and those are always bound
as statement parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class UserField(str, Enum):
    """Columns a lookup may filter on."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"


@dataclass(frozen=True)
class FieldEquals:
    """``<field> = <value>``"""

    field: UserField
    value: str

    def to_sql(self) -> str:
        return f"{self.field.value} = ?"


@dataclass(frozen=True)
class UserCriteria:
    """A conjunction of ``FieldEquals`` predicates.

    No predicates matches every record.
    """

    predicates: Tuple[FieldEquals, ...] = ()

    @classmethod
    def from_query(
        cls,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> "UserCriteria":
        """Build criteria from the optional lookup parameters.

        ``None`` and the empty string both leave the field unconstrained.
        """
        predicates: List[FieldEquals] = []
        if first_name:
            predicates.append(FieldEquals(UserField.FIRST_NAME, first_name))
        if last_name:
            predicates.append(FieldEquals(UserField.LAST_NAME, last_name))
        return cls(tuple(predicates))

    def to_sql(self) -> Tuple[str, Tuple[str, ...]]:
        """Return the ``WHERE`` clause (with a leading space) and its parameters.

        The clause is empty when there are no predicates.
        """
        if not self.predicates:
            return "", ()
        clause = " AND ".join(predicate.to_sql() for predicate in self.predicates)
        params = tuple(predicate.value for predicate in self.predicates)
        return f" WHERE {clause}", params

    def __bool__(self) -> bool:
        return bool(self.predicates)
