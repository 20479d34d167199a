from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sorting_visualizer.algorithms import (
    bubble_sort_steps,
    heap_sort_steps,
    insertion_sort_steps,
    merge_sort_steps,
    quick_sort_steps,
    radix_sort_steps,
    selection_sort_steps,
)
from sorting_visualizer.steps import Step

logger = logging.getLogger(__name__)


class SortingAlgorithm(str, Enum):
    BUBBLE = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE = "merge"
    QUICK = "quick"
    HEAP = "heap"
    RADIX = "radix"


@dataclass(frozen=True)
class AlgorithmInfo:
    name: str
    description: str
    best: str
    average: str
    worst: str
    space: str
    category: str


ALGORITHMS = {
    SortingAlgorithm.BUBBLE: bubble_sort_steps,
    SortingAlgorithm.SELECTION: selection_sort_steps,
    SortingAlgorithm.INSERTION: insertion_sort_steps,
    SortingAlgorithm.MERGE: merge_sort_steps,
    SortingAlgorithm.QUICK: quick_sort_steps,
    SortingAlgorithm.HEAP: heap_sort_steps,
    SortingAlgorithm.RADIX: radix_sort_steps,
}

ALGORITHM_INFO = {
    SortingAlgorithm.BUBBLE: AlgorithmInfo(
        name="Bubble Sort",
        description="Repeatedly steps through the list, compares adjacent elements "
        "and swaps them if they are in the wrong order.",
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
        category="Comparison",
    ),
    SortingAlgorithm.SELECTION: AlgorithmInfo(
        name="Selection Sort",
        description="Finds the minimum element of the unsorted portion and places it "
        "at the beginning.",
        best="O(n²)", average="O(n²)", worst="O(n²)", space="O(1)",
        category="Comparison",
    ),
    SortingAlgorithm.INSERTION: AlgorithmInfo(
        name="Insertion Sort",
        description="Builds the sorted array one item at a time. Efficient for small "
        "and nearly sorted inputs.",
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
        category="Comparison",
    ),
    SortingAlgorithm.MERGE: AlgorithmInfo(
        name="Merge Sort",
        description="Divides the array into halves, sorts them separately and merges "
        "them back together.",
        best="O(n log n)", average="O(n log n)", worst="O(n log n)", space="O(n)",
        category="Divide & Conquer",
    ),
    SortingAlgorithm.QUICK: AlgorithmInfo(
        name="Quick Sort",
        description="Selects a pivot element and partitions the array around it.",
        best="O(n log n)", average="O(n log n)", worst="O(n²)", space="O(log n)",
        category="Divide & Conquer",
    ),
    SortingAlgorithm.HEAP: AlgorithmInfo(
        name="Heap Sort",
        description="Builds a max-heap and repeatedly extracts the maximum element.",
        best="O(n log n)", average="O(n log n)", worst="O(n log n)", space="O(1)",
        category="Comparison",
    ),
    SortingAlgorithm.RADIX: AlgorithmInfo(
        name="Radix Sort",
        description="Sorts integers digit by digit, from the least significant digit up.",
        best="O(nk)", average="O(nk)", worst="O(nk)", space="O(n + k)",
        category="Non-comparison",
    ),
}


def resolve_algorithm(selector) -> SortingAlgorithm | None:
    """Map a selector string (or enum member) to its algorithm, or None."""
    try:
        return SortingAlgorithm(selector)
    except ValueError:
        return None


def get_sorting_steps(selector, elements) -> list[Step]:
    algorithm = resolve_algorithm(selector)
    if algorithm is None:
        logger.warning("Unknown sorting algorithm %r, returning an empty trace", selector)
        return []
    return ALGORITHMS[algorithm](elements)
