"""Run-scoped tracking of values already emitted for unique fields."""

import json
from collections.abc import Hashable
from typing import Any


class UniquenessRegistry:
    """
    Field name -> set of values already emitted during one seeding run.

    Buckets are keyed by field name only, so two models that both declare a
    unique ``email`` field draw from the same bucket.
    """

    def __init__(self) -> None:
        """Initialize registry."""
        self._used: dict[str, set[Hashable]] = {}

    @staticmethod
    def _key(value: Any) -> Hashable:
        # Keyed with the type so True, 1 and 1.0 stay distinct; dicts and
        # lists from custom_fn are tracked by their JSON rendering
        try:
            hash(value)
        except TypeError:
            return ("json", json.dumps(value, sort_keys=True, default=str))
        return (type(value), value)

    def used(self, field_name: str) -> set[Hashable]:
        """Get the used-value set for a field, creating it if needed.

        Args:
            field_name: Field name

        Returns:
            Set of tracked keys (see _key)
        """
        if field_name not in self._used:
            self._used[field_name] = set()
        return self._used[field_name]

    def contains(self, field_name: str, value: Any) -> bool:
        """Check whether a value was already emitted for a field."""
        return self._key(value) in self._used.get(field_name, ())

    def add(self, field_name: str, value: Any) -> None:
        """Record a value as emitted for a field."""
        self.used(field_name).add(self._key(value))

    def fields(self) -> list[str]:
        """List field names with a bucket."""
        return list(self._used.keys())

    def clear(self) -> None:
        """Clear all buckets."""
        self._used.clear()

    def __len__(self) -> int:
        return len(self._used)
