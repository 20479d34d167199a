"""Recording frames for playback.

A Step is a complete copy of the array at one instant, so the player can jump
to any index without replaying earlier frames.
"""

from __future__ import annotations

from dataclasses import dataclass

from sorting_visualizer.elements import Element, ElementState


@dataclass(frozen=True)
class Step:
    array: tuple[Element, ...]
    description: str
    comparing_indices: tuple[int, ...] = ()
    swapping_indices: tuple[int, ...] = ()

    @property
    def values(self) -> list:
        return [e.value for e in self.array]

    def to_dict(self) -> dict:
        return {
            "array": [e.to_dict() for e in self.array],
            "description": self.description,
            "comparingIndices": list(self.comparing_indices),
            "swappingIndices": list(self.swapping_indices),
        }


def record_step(sequence, description: str, comparing=(), swapping=()) -> Step:
    """
    Capture a frame: current array with highlight states overlaid.
    Swapping wins over comparing; every other position keeps its own state.
    """
    comparing = tuple(comparing)
    swapping = tuple(swapping)
    frame = []
    for idx, element in enumerate(sequence):
        if idx in swapping:
            element = element.with_state(ElementState.SWAPPING)
        elif idx in comparing:
            element = element.with_state(ElementState.COMPARING)
        frame.append(element)
    return Step(
        array=tuple(frame),
        description=description,
        comparing_indices=comparing,
        swapping_indices=swapping,
    )


def mark_sorted(sequence, indices) -> list[Element]:
    targets = set(indices)
    return [
        e.with_state(ElementState.SORTED) if idx in targets else e
        for idx, e in enumerate(sequence)
    ]


def reset_states(sequence) -> list[Element]:
    return [e.with_state(ElementState.DEFAULT) for e in sequence]
