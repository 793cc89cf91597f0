from __future__ import annotations

from typing import Dict, Iterable, Type

from .guard import Guard


class GuardRegistry:
    def __init__(self):
        self._guards: Dict[str, Type[Guard]] = {}

    def register(self, guard_cls: Type[Guard]) -> None:
        guard_id = getattr(guard_cls, "guard_id", None)
        if not guard_id:
            raise ValueError("Guard class missing guard_id")
        if guard_id in self._guards:
            raise ValueError(f"Duplicate guard_id registered: {guard_id}")
        position = getattr(guard_cls, "position", None)
        if position is None:
            raise ValueError(f"Guard {guard_id} missing position")
        for other in self._guards.values():
            if other.position == position:
                raise ValueError(f"Guards {other.guard_id} and {guard_id} share position {position}")
        self._guards[guard_id] = guard_cls

    def create_all(self) -> list[Guard]:
        """Instantiate every guard in evaluation order."""
        ordered = sorted(self._guards.values(), key=lambda cls: cls.position)
        return [cls() for cls in ordered]

    def get(self, guard_id: str) -> Type[Guard]:
        return self._guards[guard_id]

    def ids(self) -> Iterable[str]:
        return [cls.guard_id for cls in sorted(self._guards.values(), key=lambda cls: cls.position)]


registry = GuardRegistry()


def register_guard(guard_cls: Type[Guard]) -> Type[Guard]:
    registry.register(guard_cls)
    return guard_cls
