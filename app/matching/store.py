"""
Profile store abstraction used by the ranking engine.

The engine only needs two reads: a single profile by user id and the
candidate pool with some user ids excluded. Any object with those methods
works; the SQL-backed store lives in app.services.profile_store.
"""

from typing import Iterable, Protocol

from app.matching.profile import PlayerProfile


class ProfileStore(Protocol):
    def get_profile(self, user_id: str) -> PlayerProfile | None:
        ...

    def list_profiles(
        self,
        exclude_user_id: str | None = None,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[PlayerProfile]:
        ...


class InMemoryProfileStore:
    """Dict-backed store with get/set/list. Iteration follows insertion order."""

    def __init__(self, profiles: Iterable[PlayerProfile] = ()):
        self._profiles: dict[str, PlayerProfile] = {}
        for profile in profiles:
            self.set(profile)

    def get_profile(self, user_id: str) -> PlayerProfile | None:
        return self.get(user_id)

    def list_profiles(
        self,
        exclude_user_id: str | None = None,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[PlayerProfile]:
        excluded = set(exclude_ids or ())
        if exclude_user_id is not None:
            excluded.add(exclude_user_id)
        return [p for p in self._profiles.values() if p.user_id not in excluded]

    def get(self, user_id: str) -> PlayerProfile | None:
        return self._profiles.get(user_id)

    def set(self, profile: PlayerProfile) -> None:
        self._profiles[profile.user_id] = profile

    def __len__(self) -> int:
        return len(self._profiles)

    # Defined last: the name shadows the builtin for the rest of the class body
    def list(self) -> list[PlayerProfile]:
        return list(self._profiles.values())
