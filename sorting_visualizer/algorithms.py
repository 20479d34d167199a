"""Sorting algorithms that produce playback traces.

Every function takes a sequence of Elements and returns the full list of
Steps for one run. The caller's sequence is never modified: each run sorts a
private working buffer and snapshots it whenever something worth showing
happens. Sorted markings are written into the buffer itself, so they show up
in every later frame.
"""

from __future__ import annotations

import logging

from sorting_visualizer.steps import Step, mark_sorted, record_step, reset_states

logger = logging.getLogger(__name__)

DIGIT_PLACES = ("ones", "tens", "hundreds", "thousands")


# ---------------- Utilities ----------------
def _snap(steps, a, note, comparing=(), swapping=()):
    steps.append(record_step(a, note, comparing, swapping))


def _done(name, steps, n):
    logger.debug("%s produced %d steps for %d elements", name, len(steps), n)
    return steps


def _digit_place(exp):
    power = len(str(exp)) - 1
    if power < len(DIGIT_PLACES):
        return DIGIT_PLACES[power]
    return f"10^{power}"


# ---------------- Exchange sorts ----------------
def bubble_sort_steps(elements) -> list[Step]:
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Bubble Sort")
    for i in range(n - 1):
        for j in range(n - i - 1):
            _snap(steps, a, f"Comparing elements at positions {j} and {j + 1}", comparing=[j, j + 1])
            if a[j].value > a[j + 1].value:
                _snap(steps, a, f"Swapping elements at positions {j} and {j + 1}", swapping=[j, j + 1])
                a[j], a[j + 1] = a[j + 1], a[j]
                _snap(steps, a, "Elements swapped")
        a[:] = mark_sorted(a, [n - i - 1])
        _snap(steps, a, f"Element at position {n - i - 1} is now in its final position")
    if n:
        # the pass loop never reaches index 0 on its own
        a[:] = mark_sorted(a, [0])
    _snap(steps, a, "Bubble Sort completed!")
    return _done("Bubble Sort", steps, n)


def selection_sort_steps(elements) -> list[Step]:
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Selection Sort")
    for i in range(n - 1):
        min_idx = i
        _snap(steps, a, f"Finding minimum element in unsorted portion starting from position {i}", comparing=[i])
        for j in range(i + 1, n):
            _snap(
                steps, a,
                f"Comparing element at position {j} with current minimum at position {min_idx}",
                comparing=[j, min_idx],
            )
            if a[j].value < a[min_idx].value:
                min_idx = j
                _snap(steps, a, f"New minimum found at position {j}", comparing=[j])
        if min_idx != i:
            _snap(steps, a, f"Swapping elements at positions {i} and {min_idx}", swapping=[i, min_idx])
            a[i], a[min_idx] = a[min_idx], a[i]
        a[:] = mark_sorted(a, [i])
        _snap(steps, a, f"Element at position {i} is now in its final position")
    if n:
        a[:] = mark_sorted(a, [n - 1])
    _snap(steps, a, "Selection Sort completed!")
    return _done("Selection Sort", steps, n)


def insertion_sort_steps(elements) -> list[Step]:
    """
    The key walks left one exchange at a time instead of leaving a hole,
    so every frame holds each element exactly once.
    """
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Insertion Sort")
    if n:
        a[:] = mark_sorted(a, [0])
        _snap(steps, a, "First element is considered sorted")
    for i in range(1, n):
        key = a[i]
        j = i - 1
        _snap(steps, a, f"Inserting element {key.value} into sorted portion", comparing=[i])
        # invariant: the key sits at j + 1
        while j >= 0 and a[j].value > key.value:
            _snap(steps, a, f"Comparing {key.value} with {a[j].value}", comparing=[j, j + 1])
            _snap(steps, a, f"Shifting element {a[j].value} to the right", swapping=[j, j + 1])
            a[j], a[j + 1] = a[j + 1], a[j]
            j -= 1
        a[:] = mark_sorted(a, range(i + 1))
        _snap(steps, a, f"Element {key.value} inserted at position {j + 1}")
    _snap(steps, a, "Insertion Sort completed!")
    return _done("Insertion Sort", steps, n)


# ---------------- Divide and conquer ----------------
def merge_sort_steps(elements) -> list[Step]:
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Merge Sort")

    def merge(low, mid, high):
        _snap(
            steps, a,
            f"Merging subarrays [{low}-{mid}] and [{mid + 1}-{high}]",
            comparing=range(low, high + 1),
        )
        # i: head of the left run, j: head of the right run
        i, j = low, mid + 1
        while i <= mid and j <= high:
            _snap(steps, a, f"Comparing {a[i].value} and {a[j].value}", comparing=[i, j])
            if a[i].value <= a[j].value:
                i += 1
            else:
                # right head takes slot i, the rest of the left run moves up one
                a[i:j + 1] = [a[j]] + a[i:j]
                i += 1
                mid += 1
                j += 1
        # whatever is left of either run is already in place
        _snap(steps, a, f"Merged subarrays [{low}-{high}]")

    def sort(low, high):
        if low >= high:
            return
        mid = (low + high) // 2
        _snap(steps, a, f"Dividing array into [{low}-{mid}] and [{mid + 1}-{high}]")
        sort(low, mid)
        sort(mid + 1, high)
        merge(low, mid, high)

    sort(0, n - 1)
    a[:] = mark_sorted(a, range(n))
    _snap(steps, a, "Merge Sort completed!")
    return _done("Merge Sort", steps, n)


def quick_sort_steps(elements) -> list[Step]:
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Quick Sort")

    def partition(low, high):
        pivot = a[high]
        _snap(steps, a, f"Chosen pivot: {pivot.value} at position {high}", comparing=[high])
        i = low - 1
        for j in range(low, high):
            _snap(steps, a, f"Comparing {a[j].value} with pivot {pivot.value}", comparing=[j, high])
            if a[j].value < pivot.value:
                i += 1
                if i != j:
                    _snap(steps, a, f"Swapping elements at positions {i} and {j}", swapping=[i, j])
                    a[i], a[j] = a[j], a[i]
        _snap(steps, a, f"Placing pivot at position {i + 1}", swapping=[i + 1, high])
        a[i + 1], a[high] = a[high], a[i + 1]
        return i + 1

    # pending spans, left side on top so spans run in the same order as recursion
    spans = [(0, n - 1)]
    while spans:
        low, high = spans.pop()
        if low < high:
            p = partition(low, high)
            a[:] = mark_sorted(a, [p])
            _snap(steps, a, f"Pivot {a[p].value} is now at its final position {p}")
            spans.append((p + 1, high))
            spans.append((low, p - 1))
        elif low == high:
            a[:] = mark_sorted(a, [low])
            _snap(steps, a, f"Single element at position {low} is sorted")

    _snap(steps, a, "Quick Sort completed!")
    return _done("Quick Sort", steps, n)


# ---------------- Heap ----------------
def heap_sort_steps(elements) -> list[Step]:
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Heap Sort")

    def heapify(size, root):
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2
        _snap(steps, a, f"Heapifying at index {root}", comparing=[root])
        if left < size:
            _snap(
                steps, a,
                f"Comparing parent {a[root].value} with left child {a[left].value}",
                comparing=[root, left],
            )
            if a[left].value > a[largest].value:
                largest = left
        if right < size:
            _snap(
                steps, a,
                f"Comparing {a[largest].value} with right child {a[right].value}",
                comparing=[largest, right],
            )
            if a[right].value > a[largest].value:
                largest = right
        if largest != root:
            _snap(steps, a, f"Swapping {a[root].value} with {a[largest].value}", swapping=[root, largest])
            a[root], a[largest] = a[largest], a[root]
            heapify(size, largest)

    _snap(steps, a, "Building max heap")
    for i in range(n // 2 - 1, -1, -1):
        heapify(n, i)
    _snap(steps, a, "Max heap built, starting extraction")

    for end in range(n - 1, 0, -1):
        _snap(steps, a, f"Moving maximum element {a[0].value} to position {end}", swapping=[0, end])
        a[0], a[end] = a[end], a[0]
        a[:] = mark_sorted(a, [end])
        _snap(steps, a, f"Element at position {end} is now sorted")
        heapify(end, 0)

    if n:
        a[:] = mark_sorted(a, [0])
    _snap(steps, a, "Heap Sort completed!")
    return _done("Heap Sort", steps, n)


# ---------------- Digit based ----------------
def radix_sort_steps(elements) -> list[Step]:
    """
    LSD radix sort over decimal digits of the integer part of each value.

    Meant for non-negative integers. Values sharing an integer part keep
    their input order, so fractional parts are not ordered: [1.5, 1.2]
    comes back unchanged.
    """
    steps = []
    a = reset_states(elements)
    n = len(a)
    _snap(steps, a, "Starting Radix Sort")

    def counting_pass(exp):
        place = _digit_place(exp)
        _snap(steps, a, f"Sorting by the {place} digit (position {exp})")
        digits = [int(e.value // exp) % 10 for e in a]
        count = [0] * 10
        for idx, digit in enumerate(digits):
            count[digit] += 1
            _snap(steps, a, f"Element {a[idx].value} has digit {digit} in the {place} place", comparing=[idx])
        for digit in range(1, 10):
            count[digit] += count[digit - 1]
        # scanning right to left keeps equal digits in input order
        output = [None] * n
        for idx in range(n - 1, -1, -1):
            count[digits[idx]] -= 1
            output[count[digits[idx]]] = a[idx]
        a[:] = output
        _snap(steps, a, f"Completed sorting by the {place} digit")

    max_value = max((e.value for e in a), default=0)
    _snap(steps, a, f"Maximum value is {max_value}")
    exp = 1
    # an all-zero (or empty) input needs no digit passes at all
    while max_value // exp > 0:
        counting_pass(exp)
        exp *= 10

    a[:] = mark_sorted(a, range(n))
    _snap(steps, a, "Radix Sort completed!")
    return _done("Radix Sort", steps, n)
