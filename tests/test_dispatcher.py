import pytest

from sorting_visualizer.dispatcher import (
    ALGORITHM_INFO,
    ALGORITHMS,
    SortingAlgorithm,
    get_sorting_steps,
    resolve_algorithm,
)
from sorting_visualizer.elements import make_elements


def test_exactly_seven_algorithms_are_registered():
    assert set(ALGORITHMS) == set(SortingAlgorithm)
    assert len(ALGORITHMS) == 7


def test_every_algorithm_has_display_info():
    assert set(ALGORITHM_INFO) == set(SortingAlgorithm)
    assert ALGORITHM_INFO[SortingAlgorithm.RADIX].category == "Non-comparison"


@pytest.mark.parametrize("selector", [a.value for a in SortingAlgorithm])
def test_string_selectors_dispatch_to_their_algorithm(selector):
    steps = get_sorting_steps(selector, make_elements([3, 1, 2]))
    assert steps[0].description == f"Starting {ALGORITHM_INFO[SortingAlgorithm(selector)].name}"
    assert steps[-1].values == [1, 2, 3]


def test_enum_members_are_accepted():
    steps = get_sorting_steps(SortingAlgorithm.HEAP, make_elements([2, 1]))
    assert steps[0].description == "Starting Heap Sort"


@pytest.mark.parametrize("selector", ["bogo", "", "BUBBLE", None, 3])
def test_unknown_selector_yields_empty_trace(selector):
    assert get_sorting_steps(selector, make_elements([5, 4, 3])) == []


def test_unknown_selector_is_logged(caplog):
    with caplog.at_level("WARNING", logger="sorting_visualizer.dispatcher"):
        get_sorting_steps("bogo", make_elements([1]))
    assert "bogo" in caplog.text


def test_resolve_algorithm():
    assert resolve_algorithm("quick") is SortingAlgorithm.QUICK
    assert resolve_algorithm("shell") is None
