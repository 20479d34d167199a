from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ElementState(str, Enum):
    DEFAULT = "default"
    COMPARING = "comparing"
    SWAPPING = "swapping"
    SORTED = "sorted"


@dataclass(frozen=True)
class Element:
    """One bar: a value with a stable identity and its current visual state."""

    id: int
    value: int  # radix sort assumes non-negative integers; the other sorts take any number
    state: ElementState = ElementState.DEFAULT

    def with_state(self, state: ElementState) -> Element:
        return replace(self, state=state)

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "state": self.state.value}


def make_elements(values) -> list[Element]:
    """Wrap plain numbers as Elements, ids following input order."""
    return [Element(id=i, value=v) for i, v in enumerate(values)]
