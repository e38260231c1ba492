"""
Typed profile record consumed by the scoring engine.

The engine never sees ORM rows or raw request payloads. Everything is
converted into a PlayerProfile first, which keeps only the fields that
matter for compatibility scoring and normalizes collections into sets:

  - preferred_game_types: frozenset of game names
  - availability: day name -> frozenset of time slots

Missing or malformed optional values become empty collections / None so
that scoring stays total over any profile.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from collections.abc import Iterable as IterableABC
from typing import Any, Iterable, Mapping


def _to_slot_set(values: Iterable[Any] | None) -> frozenset:
    if not isinstance(values, IterableABC) or isinstance(values, (str, bytes)):
        return frozenset()
    return frozenset(str(v) for v in values if v is not None)


def _to_availability(raw: Mapping[str, Any] | None) -> Mapping[str, frozenset]:
    if not isinstance(raw, Mapping):
        return MappingProxyType({})
    return MappingProxyType(
        {str(day): _to_slot_set(slots) for day, slots in raw.items()}
    )


@dataclass(frozen=True)
class PlayerProfile:
    """Matchmaking-relevant attributes of one player."""

    user_id: str
    skill_level: float = 0.0
    preferred_location: str | None = None
    preferred_game_types: frozenset = field(default_factory=frozenset)
    availability: Mapping[str, frozenset] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls,
        user_id: str,
        skill_level: float | None = None,
        preferred_location: str | None = None,
        preferred_game_types: Iterable[str] | None = None,
        availability: Mapping[str, Iterable[str]] | None = None,
    ) -> "PlayerProfile":
        """Build a profile from loosely-typed values (lists, dicts, None)."""
        return cls(
            user_id=str(user_id),
            skill_level=float(skill_level) if skill_level is not None else 0.0,
            preferred_location=preferred_location or None,
            preferred_game_types=_to_slot_set(preferred_game_types),
            availability=_to_availability(availability),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PlayerProfile":
        """Build a profile from a dict, ignoring unknown keys."""
        return cls.build(
            user_id=data["user_id"],
            skill_level=data.get("skill_level"),
            preferred_location=data.get("preferred_location"),
            preferred_game_types=data.get("preferred_game_types"),
            availability=data.get("availability"),
        )


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate profile with its compatibility score for one viewer."""

    profile: PlayerProfile
    match_score: int
