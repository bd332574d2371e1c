"""Trace properties shared by every sorting engine, plus per-engine scenarios."""

import pytest

from algorithms import REGISTRY
from algorithms.bubble_sort import bubble_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort
from algorithms.selection_sort import selection_sort
from arrays import generate_random_array


ENGINES = {key: info.fn for key, info in REGISTRY.items()}

INPUTS = [
    [1],
    [2, 1],
    [5, 3, 8, 1],
    [1, 2, 3],
    [9, 7, 5, 3, 1],
    [3, 3, 1, 3],
    [0, -2, 5, -2, 7],
    [4, 4, 4, 4],
    generate_random_array(12, seed=1),
    generate_random_array(25, seed=7),
]


@pytest.fixture(params=sorted(ENGINES))
def engine(request):
    return ENGINES[request.param]


@pytest.fixture(params=range(len(INPUTS)), ids=lambda i: f"input{i}")
def values(request):
    return list(INPUTS[request.param])


class TestTraceProperties:
    def test_final_step_is_sorted_and_complete(self, engine, values):
        trace = engine(values)
        last = trace[-1]
        assert list(last.array) == sorted(values)
        assert sorted(last.sorted) == list(range(len(values)))

    def test_array_length_is_constant(self, engine, values):
        for step in engine(values):
            assert len(step.array) == len(values)

    def test_indices_are_in_range(self, engine, values):
        n = len(values)
        for step in engine(values):
            for idx in step.comparing + step.swapping + step.sorted:
                assert 0 <= idx < n
            if step.pivot is not None:
                assert 0 <= step.pivot < n

    def test_highlight_sets_hold_at_most_two_indices(self, engine, values):
        for step in engine(values):
            assert len(step.comparing) <= 2
            assert len(step.swapping) <= 2

    def test_sorted_never_loses_an_index(self, engine, values):
        trace = engine(values)
        for prev, cur in zip(trace, trace[1:]):
            assert set(prev.sorted) <= set(cur.sorted)
            assert len(set(cur.sorted)) == len(cur.sorted)

    def test_deterministic(self, engine, values):
        assert engine(values) == engine(values)

    def test_input_is_not_mutated(self, engine, values):
        original = list(values)
        engine(values)
        assert values == original

    def test_every_step_is_a_permutation_of_the_input(self, engine, values):
        for step in engine(values):
            if engine is not insertion_sort and engine is not merge_sort:
                assert sorted(step.array) == sorted(values)

    @pytest.mark.parametrize("key", ["bubble", "insertion", "selection", "merge"])
    def test_only_quick_sort_sets_a_pivot(self, key, values):
        for step in ENGINES[key](values):
            assert step.pivot is None

    def test_pseudocode_lines_point_into_listing(self, engine, values):
        info = next(i for i in REGISTRY.values() if i.fn is engine)
        for step in engine(values):
            assert 0 <= step.pseudocode_line < len(info.pseudocode)
            assert step.explanation


class TestEdgeCases:
    def test_empty_input_yields_no_steps(self, engine):
        assert engine([]) == []

    def test_single_element(self, engine):
        trace = engine([42])
        assert len(trace) >= 1
        assert trace[-1].array == (42,)
        assert trace[-1].sorted == (0,)

    def test_already_sorted_input_never_changes_the_array(self, engine):
        for step in engine([1, 2, 3]):
            assert step.array == (1, 2, 3)

    def test_accepts_tuples(self, engine):
        assert list(engine((3, 1, 2))[-1].array) == [1, 2, 3]


class TestBubbleSort:
    def test_first_step_compares_first_pair(self):
        trace = bubble_sort([5, 3, 8, 1])
        assert trace[0].comparing == (0, 1)
        assert trace[0].array == (5, 3, 8, 1)

    def test_final_array(self):
        assert bubble_sort([5, 3, 8, 1])[-1].array == (1, 3, 5, 8)

    def test_swap_is_marked_before_it_happens(self):
        trace = bubble_sort([2, 1])
        assert trace[0].comparing == (0, 1)
        assert trace[1].swapping == (0, 1)
        assert trace[1].array == (2, 1)
        assert trace[2].array == (1, 2)
        assert trace[2].swapping == () and trace[2].comparing == ()

    def test_sorted_is_prepended_per_pass(self):
        trace = bubble_sort([3, 2, 1])
        pass_ends = [s.sorted for s in trace if not s.comparing and not s.swapping and s.sorted]
        # post-swap frames repeat the sorted tuple; keep distinct values in order
        distinct = [t for i, t in enumerate(pass_ends) if i == 0 or t != pass_ends[i - 1]]
        assert distinct == [(2,), (1, 2), (0, 1, 2)]

    def test_runs_n_outer_passes(self):
        trace = bubble_sort([1, 2, 3, 4])
        # no swaps: n*(n-1)/2 comparisons + n pass-end frames
        assert len(trace) == 6 + 4


class TestInsertionSort:
    def test_index_zero_is_sorted_before_any_comparison(self):
        trace = insertion_sort([3, 1, 2])
        assert trace[0].sorted == (0,)
        assert trace[0].comparing == ()

    def test_intent_frame_compares_with_left_neighbour(self):
        trace = insertion_sort([3, 1, 2])
        assert trace[1].comparing == (1, 0)

    def test_full_trace_shape(self):
        trace = insertion_sort([3, 1, 2])
        assert len(trace) == 10
        assert [s.swapping for s in trace if s.swapping] == [(0, 1), (1, 2)]
        assert [s.sorted for s in trace][-1] == (0, 1, 2)
        # shifting copies values right, so the frame after a shift shows a duplicate
        assert trace[8].comparing == (2, 0)
        assert trace[8].array == (1, 3, 3)

    def test_sorted_grows_left_to_right(self):
        trace = insertion_sort([4, 3, 2, 1])
        assert trace[-1].sorted == (0, 1, 2, 3)


class TestSelectionSort:
    def test_two_elements_swap_once(self):
        trace = selection_sort([2, 1])
        swaps = [s for s in trace if s.swapping]
        assert len(swaps) == 1
        assert swaps[0].swapping == (0, 1)
        assert trace[-1].sorted == (0, 1)
        assert trace[-1].array == (1, 2)

    def test_new_minimum_is_a_single_index_highlight(self):
        trace = selection_sort([2, 1])
        assert trace[0].comparing == (0, 1)
        assert trace[1].comparing == (1,)

    def test_no_swap_when_minimum_already_in_place(self):
        trace = selection_sort([1, 2])
        assert all(not s.swapping for s in trace)

    def test_last_index_closes_the_trace(self):
        trace = selection_sort([3, 1, 2])
        assert trace[-1].sorted[-1] == 2
        assert trace[-2].sorted == (0, 1)


class TestMergeSort:
    def test_two_elements(self):
        trace = merge_sort([2, 1])
        assert len(trace) == 8
        assert trace[0].sorted == (0,)
        assert trace[1].sorted == (0, 1)
        assert trace[2].comparing == (0, 1)
        assert trace[3].swapping == (0,)
        assert trace[-1].array == (1, 2)

    def test_placement_marks_a_single_slot(self):
        for step in merge_sort([4, 1, 3, 2]):
            if step.swapping:
                assert len(step.swapping) == 1

    def test_comparisons_use_original_coordinates(self):
        trace = merge_sort([4, 3, 2, 1])
        # top-level merge of [0..1] with [2..3]
        top = [s.comparing for s in trace if s.comparing and s.comparing[0] <= 1 and s.comparing[1] >= 2]
        assert top[0] == (0, 2)

    def test_sorted_can_fill_before_array_is_sorted(self):
        trace = merge_sort([2, 1])
        assert sorted(trace[1].sorted) == [0, 1]
        assert trace[1].array == (2, 1)


class TestQuickSort:
    def test_known_trace(self):
        trace = quick_sort([5, 3, 8, 1])
        assert len(trace) == 15
        assert trace[0].pivot == 3
        assert trace[0].comparing == ()
        assert trace[1].comparing == (0, 3)
        assert trace[-1].array == (1, 3, 5, 8)
        assert trace[-1].sorted == (0, 2, 1, 3)

    def test_pivot_cleared_right_after_pivot_placement(self):
        for values in INPUTS:
            trace = quick_sort(values)
            for cur, nxt in zip(trace, trace[1:]):
                if cur.pivot is not None and cur.pivot in cur.swapping:
                    assert nxt.pivot is None

    def test_comparisons_are_against_pivot(self):
        for step in quick_sort([9, 4, 7, 1, 6]):
            if len(step.comparing) == 2:
                assert step.pivot == step.comparing[1]

    def test_sorted_step_has_no_pivot(self):
        trace = quick_sort([3, 1, 2])
        for prev, cur in zip(trace, trace[1:]):
            if len(cur.sorted) > len(prev.sorted):
                assert cur.pivot is None

    def test_sorted_input_degrades_quadratically(self):
        n = 20
        trace = quick_sort(list(range(n)))
        comparisons = sum(1 for s in trace if len(s.comparing) == 2)
        assert comparisons == n * (n - 1) // 2
