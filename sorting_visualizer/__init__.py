"""Step-by-step traces of classic sorting algorithms, plus a small Flask player."""

from sorting_visualizer.dispatcher import ALGORITHM_INFO, ALGORITHMS, SortingAlgorithm, get_sorting_steps
from sorting_visualizer.elements import Element, ElementState, make_elements
from sorting_visualizer.steps import Step, mark_sorted, record_step, reset_states

__all__ = [
    "ALGORITHM_INFO",
    "ALGORITHMS",
    "Element",
    "ElementState",
    "SortingAlgorithm",
    "Step",
    "get_sorting_steps",
    "make_elements",
    "mark_sorted",
    "record_step",
    "reset_states",
]
