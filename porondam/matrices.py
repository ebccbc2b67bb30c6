"""Compatibility matrices and positional tables used by the Porondam aspects.

The literal tables are transcribed row by row from the traditional scheme.
Lookups always read the row of the first argument; no symmetry is assumed,
because the tradition occasionally defines a direction ("who offends whom").

Two gaps in the traditional rows are filled explicitly so that every class
the catalog produces has a complete row and column:

* the Goat column of the yoni table (only Pushya is a Goat; its row is
  defined, the other rows historically fell back to the neutral score 2);
* the diagonal of the planetary friendship table (two signs sharing a lord
  were historically scored as neutral).

:func:`verify_matrices` runs at import time and raises
:class:`~porondam.errors.IncompleteMatrixError` if a table is incomplete.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

from .catalog import GANAS, MANSION_COUNT, MANSIONS, PLANETS, SIGN_COUNT, SIGNS, YONIS
from .errors import IncompleteMatrixError

__all__ = [
    "Relation",
    "CompatibilityMatrix",
    "YONI_MATRIX",
    "GANA_MATRIX",
    "FRIENDSHIP_MATRIX",
    "RAJJU_PARTS",
    "MANSION_RAJJU",
    "VEDHA_PAIRS",
    "VASHYA_GROUPS",
    "SIGN_VASHYA",
    "VARNAS",
    "SIGN_VARNA",
    "BIRDS",
    "bird_for_mansion",
    "is_vedha",
    "verify_matrices",
]

LOG = logging.getLogger(__name__)

V = TypeVar("V")


class Relation(str, Enum):
    """Natural relationship between two ruling planets."""

    FRIEND = "friend"
    NEUTRAL = "neutral"
    ENEMY = "enemy"


@dataclass(frozen=True)
class CompatibilityMatrix(Generic[V]):
    """Immutable ``(row, column) -> value`` table with strict lookups."""

    name: str
    rows: Mapping[str, Mapping[str, V]]

    @classmethod
    def from_rows(cls, name: str, rows: Mapping[str, Mapping[str, V]]) -> CompatibilityMatrix[V]:
        frozen = {key: MappingProxyType(dict(row)) for key, row in rows.items()}
        return cls(name=name, rows=MappingProxyType(frozen))

    def lookup(self, row: str, column: str) -> V:
        """Return the entry for ``row`` against ``column``.

        Arguments are read in order: the first selects the row. Unknown
        combinations raise :class:`IncompleteMatrixError`.
        """

        try:
            return self.rows[row][column]
        except KeyError:
            raise IncompleteMatrixError(self.name, row, column) from None

    def require_complete(self, classes: Iterable[str]) -> None:
        """Raise unless every pair drawn from ``classes`` has an entry."""

        values = tuple(dict.fromkeys(classes))
        for row in values:
            if row not in self.rows:
                raise IncompleteMatrixError(self.name, row)
            for column in values:
                if column not in self.rows[row]:
                    raise IncompleteMatrixError(self.name, row, column)


# Yoni scores: 4 same, 3 friendly, 2 neutral, 1 enemy, 0 sworn enemy.
_YONI_ROWS: dict[str, dict[str, int]] = {
    "Horse": {"Horse": 4, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 1, "Buffalo": 0, "Tiger": 1, "Deer": 3, "Monkey": 2, "Mongoose": 2, "Lion": 1},
    "Elephant": {"Horse": 2, "Elephant": 4, "Sheep": 3, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 1, "Deer": 2, "Monkey": 2, "Mongoose": 2, "Lion": 0},
    "Sheep": {"Horse": 2, "Elephant": 3, "Sheep": 4, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 1, "Deer": 2, "Monkey": 0, "Mongoose": 2, "Lion": 1},
    "Serpent": {"Horse": 2, "Elephant": 2, "Sheep": 2, "Serpent": 4, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 1, "Buffalo": 2, "Tiger": 2, "Deer": 2, "Monkey": 2, "Mongoose": 0, "Lion": 2},
    "Dog": {"Horse": 2, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 4, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 2, "Deer": 0, "Monkey": 2, "Mongoose": 2, "Lion": 2},
    "Cat": {"Horse": 2, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 2, "Cat": 4, "Rat": 0, "Cow": 2, "Buffalo": 2, "Tiger": 2, "Deer": 2, "Monkey": 2, "Mongoose": 2, "Lion": 2},
    "Rat": {"Horse": 2, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 2, "Cat": 0, "Rat": 4, "Cow": 2, "Buffalo": 2, "Tiger": 2, "Deer": 2, "Monkey": 2, "Mongoose": 2, "Lion": 2},
    "Cow": {"Horse": 1, "Elephant": 2, "Sheep": 2, "Serpent": 1, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 4, "Buffalo": 3, "Tiger": 0, "Deer": 2, "Monkey": 2, "Mongoose": 2, "Lion": 1},
    "Buffalo": {"Horse": 0, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 3, "Buffalo": 4, "Tiger": 1, "Deer": 2, "Monkey": 2, "Mongoose": 2, "Lion": 1},
    "Tiger": {"Horse": 1, "Elephant": 1, "Sheep": 1, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 0, "Buffalo": 1, "Tiger": 4, "Deer": 1, "Monkey": 2, "Mongoose": 2, "Lion": 2},
    "Deer": {"Horse": 3, "Elephant": 2, "Sheep": 2, "Serpent": 2, "Dog": 0, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 1, "Deer": 4, "Monkey": 2, "Mongoose": 2, "Lion": 1},
    "Monkey": {"Horse": 2, "Elephant": 2, "Sheep": 0, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 2, "Deer": 2, "Monkey": 4, "Mongoose": 2, "Lion": 2},
    "Mongoose": {"Horse": 2, "Elephant": 2, "Sheep": 2, "Serpent": 0, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 2, "Deer": 2, "Monkey": 2, "Mongoose": 4, "Lion": 2},
    "Lion": {"Horse": 1, "Elephant": 0, "Sheep": 1, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 1, "Buffalo": 1, "Tiger": 2, "Deer": 1, "Monkey": 2, "Mongoose": 2, "Lion": 4},
    "Goat": {"Horse": 2, "Elephant": 3, "Sheep": 4, "Serpent": 2, "Dog": 2, "Cat": 2, "Rat": 2, "Cow": 2, "Buffalo": 2, "Tiger": 1, "Deer": 2, "Monkey": 0, "Mongoose": 2, "Lion": 1, "Goat": 4},
}
for _animal, _row in _YONI_ROWS.items():
    _row.setdefault("Goat", 2)

YONI_MATRIX: CompatibilityMatrix[int] = CompatibilityMatrix.from_rows("yoni", _YONI_ROWS)

# Gana scores out of 6; the row is the first (bride's) temperament.
GANA_MATRIX: CompatibilityMatrix[int] = CompatibilityMatrix.from_rows(
    "gana",
    {
        "Deva": {"Deva": 6, "Manushya": 5, "Rakshasa": 1},
        "Manushya": {"Deva": 6, "Manushya": 6, "Rakshasa": 0},
        "Rakshasa": {"Deva": 0, "Manushya": 0, "Rakshasa": 6},
    },
)

_F, _N, _E = Relation.FRIEND, Relation.NEUTRAL, Relation.ENEMY

_FRIENDSHIP_ROWS: dict[str, dict[str, Relation]] = {
    "Sun": {"Moon": _F, "Mars": _F, "Mercury": _N, "Jupiter": _F, "Venus": _E, "Saturn": _E, "Rahu": _E, "Ketu": _N},
    "Moon": {"Sun": _F, "Mars": _N, "Mercury": _N, "Jupiter": _F, "Venus": _N, "Saturn": _N, "Rahu": _E, "Ketu": _N},
    "Mars": {"Sun": _F, "Moon": _F, "Mercury": _E, "Jupiter": _F, "Venus": _N, "Saturn": _N, "Rahu": _E, "Ketu": _N},
    "Mercury": {"Sun": _N, "Moon": _E, "Mars": _N, "Jupiter": _N, "Venus": _F, "Saturn": _N, "Rahu": _N, "Ketu": _N},
    "Jupiter": {"Sun": _F, "Moon": _F, "Mars": _F, "Mercury": _N, "Venus": _E, "Saturn": _N, "Rahu": _E, "Ketu": _N},
    "Venus": {"Sun": _E, "Moon": _N, "Mars": _N, "Mercury": _F, "Jupiter": _N, "Saturn": _F, "Rahu": _N, "Ketu": _N},
    "Saturn": {"Sun": _E, "Moon": _E, "Mars": _E, "Mercury": _F, "Jupiter": _N, "Venus": _F, "Rahu": _F, "Ketu": _N},
    "Rahu": {"Sun": _E, "Moon": _E, "Mars": _E, "Mercury": _N, "Jupiter": _E, "Venus": _N, "Saturn": _F, "Ketu": _N},
    "Ketu": {"Sun": _N, "Moon": _N, "Mars": _N, "Mercury": _N, "Jupiter": _N, "Venus": _N, "Saturn": _N, "Rahu": _N},
}
for _planet, _row in _FRIENDSHIP_ROWS.items():
    _row.setdefault(_planet, _N)

FRIENDSHIP_MATRIX: CompatibilityMatrix[Relation] = CompatibilityMatrix.from_rows(
    "planetary friendship", _FRIENDSHIP_ROWS
)

# Rajju: Pada (feet), Kati (hip), Nabhi (navel), Kantha (neck), Shira (head).
RAJJU_PARTS: Sequence[str] = ("Pada", "Kati", "Nabhi", "Kantha", "Shira")

_RAJJU_CYCLE: Sequence[str] = ("Kantha", "Kati", "Pada", "Shira", "Nabhi")

MANSION_RAJJU: Mapping[int, str] = MappingProxyType(
    {mansion_id: _RAJJU_CYCLE[(mansion_id - 1) % 5] for mansion_id in range(1, MANSION_COUNT + 1)}
)

# Unordered mansion pairs that obstruct each other.
VEDHA_PAIRS: frozenset[frozenset[int]] = frozenset(
    frozenset(pair)
    for pair in (
        (1, 18),
        (2, 17),
        (3, 16),
        (4, 15),
        (5, 23),
        (6, 22),
        (7, 21),
        (8, 20),
        (9, 19),
        (10, 27),
        (11, 26),
        (12, 25),
        (13, 24),
        (14, 23),
    )
)

VASHYA_GROUPS: Sequence[str] = ("Chatushpada", "Manava", "Jalachara", "Vanachara", "Keeta")

# Leo is listed as Vanachara (forest dweller) rather than Chatushpada.
SIGN_VASHYA: Mapping[int, str] = MappingProxyType(
    {
        1: "Chatushpada",
        2: "Chatushpada",
        3: "Manava",
        4: "Jalachara",
        5: "Vanachara",
        6: "Manava",
        7: "Manava",
        8: "Keeta",
        9: "Chatushpada",
        10: "Chatushpada",
        11: "Manava",
        12: "Jalachara",
    }
)

VARNAS: Sequence[str] = ("Brahmin", "Kshatriya", "Vaishya", "Shudra")

SIGN_VARNA: Mapping[int, int] = MappingProxyType(
    {1: 1, 2: 3, 3: 2, 4: 0, 5: 1, 6: 3, 7: 2, 8: 0, 9: 1, 10: 3, 11: 2, 12: 0}
)

BIRDS: Sequence[str] = ("Peacock", "Crow", "Owl", "Cock", "Vulture")


def bird_for_mansion(mansion_id: int) -> str:
    """Return the totem bird assigned to ``mansion_id``."""

    return BIRDS[(mansion_id - 1) % len(BIRDS)]


def is_vedha(first: int, second: int) -> bool:
    """Return ``True`` when the two mansions form an obstructing pair."""

    return frozenset((first, second)) in VEDHA_PAIRS


def verify_matrices() -> None:
    """Check every table against the class values the catalog produces."""

    YONI_MATRIX.require_complete(record.yoni for record in MANSIONS)
    GANA_MATRIX.require_complete(record.gana for record in MANSIONS)
    FRIENDSHIP_MATRIX.require_complete(record.lord for record in SIGNS)
    FRIENDSHIP_MATRIX.require_complete(PLANETS)
    for classes, matrix in ((YONIS, YONI_MATRIX), (GANAS, GANA_MATRIX)):
        matrix.require_complete(classes)
    for mansion_id in range(1, MANSION_COUNT + 1):
        if MANSION_RAJJU.get(mansion_id) not in RAJJU_PARTS:
            raise IncompleteMatrixError("rajju", str(mansion_id))
    for sign_id in range(1, SIGN_COUNT + 1):
        if SIGN_VASHYA.get(sign_id) not in VASHYA_GROUPS:
            raise IncompleteMatrixError("vashya", str(sign_id))
        if SIGN_VARNA.get(sign_id) not in range(len(VARNAS)):
            raise IncompleteMatrixError("varna", str(sign_id))
    LOG.debug("compatibility matrices verified against the reference catalog")


verify_matrices()
