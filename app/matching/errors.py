"""Errors raised by the matching engine."""


class MatchingError(Exception):
    """Base class for matching engine errors."""


class ProfileNotFound(MatchingError):
    """The viewer profile does not exist in the profile store."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Profile {user_id} not found")


class InvalidLimit(MatchingError):
    """The requested result limit is not an integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid limit {value!r}: must be an integer")
