"""Counted collection of resources held by a player."""

from dataclasses import dataclass, field

from .objects import Resource


@dataclass
class Inventory:
    """Resource counts; resources with no entry count as zero."""

    objects: dict[Resource, int] = field(default_factory=dict)

    def add(self, obj: Resource, amount: int) -> None:
        """Add ``amount`` units of ``obj``."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.objects[obj] = self.objects.get(obj, 0) + amount

    def remove(self, obj: Resource, amount: int) -> bool:
        """Take ``amount`` units of ``obj``; return False if not enough are held."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        held = self.objects.get(obj)
        if held is None or held < amount:
            return False
        remaining = held - amount
        if remaining == 0:
            del self.objects[obj]
        else:
            self.objects[obj] = remaining
        return True

    def get(self, obj: Resource) -> int:
        """Return how many units of ``obj`` are held."""
        return self.objects.get(obj, 0)

    def all_objects(self) -> list[tuple[Resource, int]]:
        """Return every resource with its count, in canonical order."""
        return [(resource, self.get(resource)) for resource in Resource]