"""Equality and ordering rules for seasons.

Seasons are compared on ``(id, episode_count)`` only. The same comparison
decides both the iteration order of a :class:`SeasonSet` and whether two
seasons count as the same member, so equal seasons always collapse into a
single entry.
"""

from bisect import bisect_left
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

if TYPE_CHECKING:
    from apitest.models.media import Season


def _cmp(left: int, right: int) -> int:
    return (left > right) - (left < right)


def season_equals(a: "Season", b: "Season") -> bool:
    """Return True when both seasons share id and episode count."""
    return a.id == b.id and a.episode_count == b.episode_count


def season_compare(a: "Season", b: "Season") -> int:
    """Three-way comparison, higher ids first, then higher episode counts.

    A negative result means ``a`` sorts before ``b``.
    """
    if a.id == b.id:
        return _cmp(b.episode_count, a.episode_count)
    return _cmp(b.id, a.id)


_season_key = cmp_to_key(season_compare)


class SeasonSet:
    """Sorted, de-duplicated collection of seasons.

    Members are kept in ``season_compare`` order. Adding a season that
    compares equal to an existing member leaves the set unchanged.
    """

    def __init__(self, seasons: Iterable["Season"] = ()):
        self._keys: list = []
        self._items: List["Season"] = []
        for season in seasons:
            self.add(season)

    def add(self, season: "Season") -> bool:
        """Insert a season. Returns False if an equal member was already present."""
        key = _season_key(season)
        index = bisect_left(self._keys, key)
        if index < len(self._items) and season_compare(self._items[index], season) == 0:
            return False
        self._keys.insert(index, key)
        self._items.insert(index, season)
        return True

    def __iter__(self) -> Iterator["Season"]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, season: object) -> bool:
        if not hasattr(season, "id") or not hasattr(season, "episode_count"):
            return False
        index = bisect_left(self._keys, _season_key(season))
        return index < len(self._items) and season_compare(self._items[index], season) == 0

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from a list of seasons and serialize back to one."""
        from apitest.models.media import Season

        from_list = core_schema.no_info_after_validator_function(
            cls, handler.generate_schema(List[Season])
        )
        return core_schema.json_or_python_schema(
            json_schema=from_list,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_list]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )

    def __repr__(self) -> str:
        members = ", ".join(f"{s.id}:{s.episode_count}" for s in self._items)
        return f"SeasonSet([{members}])"

    def matches(self, other: Iterable["Season"]) -> bool:
        """Element-wise equality in iteration order."""
        others = list(other)
        if len(others) != len(self._items):
            return False
        return all(season_equals(a, b) for a, b in zip(self._items, others))

    def by_id(self, season_id: int) -> Optional["Season"]:
        """Return the first member (highest episode count) with this id."""
        for season in self._items:
            if season.id == season_id:
                return season
        return None

    def ids(self) -> List[int]:
        return [season.id for season in self._items]
