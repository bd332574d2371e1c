"""Tests for the algorithm registry and the random array generator."""

import logging

import pytest

from algorithms import REGISTRY, get_algorithm, get_sorting_algorithm, list_algorithms
from algorithms.bubble_sort import bubble_sort
from algorithms.quick_sort import quick_sort
from arrays import generate_random_array, MIN_VALUE, MAX_VALUE, DEFAULT_ARRAY_SIZE


class TestRegistry:
    def test_registers_the_five_sorts(self):
        assert list(REGISTRY) == ["bubble", "insertion", "selection", "merge", "quick"]

    def test_lookup_by_name(self):
        assert get_sorting_algorithm("bubble") is bubble_sort
        assert get_sorting_algorithm("quick") is quick_sort

    def test_unknown_name_falls_back_to_bubble(self):
        assert get_sorting_algorithm("unknown") is get_sorting_algorithm("bubble")

    def test_unknown_name_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="algorithms"):
            info = get_algorithm("bogo")
        assert info.key == "bubble"
        assert "bogo" in caplog.text

    def test_list_algorithms_keeps_order(self):
        assert [a.key for a in list_algorithms()] == list(REGISTRY)

    def test_cards_have_labels_and_pseudocode(self):
        for info in list_algorithms():
            assert info.label.endswith("Sort")
            assert info.pseudocode
            assert info.description


class TestGenerateRandomArray:
    def test_length_and_bounds(self):
        values = generate_random_array(10, 5, 100)
        assert len(values) == 10
        assert all(5 <= v <= 100 for v in values)
        assert all(isinstance(v, int) for v in values)

    def test_defaults(self):
        values = generate_random_array()
        assert len(values) == DEFAULT_ARRAY_SIZE
        assert all(MIN_VALUE <= v <= MAX_VALUE for v in values)

    def test_seed_is_reproducible(self):
        assert generate_random_array(20, seed=3) == generate_random_array(20, seed=3)

    def test_equal_bounds(self):
        assert generate_random_array(4, 7, 7) == [7, 7, 7, 7]

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError):
            generate_random_array(size)

    def test_rejects_inverted_range(self):
        with pytest.raises(ValueError):
            generate_random_array(5, 10, 1)
