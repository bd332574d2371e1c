"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Generator-based quick sort.  The pivot is always the last element of
the range.  Yields a Step at:
  1. Pivot chosen  →  PIVOT set, before any comparison
  2. a[j] vs pivot  →  COMPARING (j, high), PIVOT still set
  3. a[j] < pivot and i ≠ j  →  SWAPPING, then the swapped array
  4. Pivot moved into its slot  →  SWAPPING, then the swapped array
     WITHOUT the pivot marker (partitioning for this call is over)
  5. Pivot slot confirmed  →  append to SORTED
  6. Singleton range not yet sorted  →  append to SORTED

Worst case (already sorted input) degrades to O(n²) steps.
"""

from typing import Generator, List, Sequence

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def quick_sort(a, low, high):",                 # 0
    "    if low == high: mark a[low] sorted",        # 1
    "    pivot ← a[high];  i ← low - 1",             # 2
    "    for j in low .. high-1:",                   # 3
    "        if a[j] < pivot:",                      # 4
    "            i ← i + 1;  swap(a[i], a[j])",      # 5
    "    swap(a[i+1], a[high])",                     # 6
    "    mark a[i+1] sorted",                        # 7
    "    quick_sort(a, low, i)",                     # 8
    "    quick_sort(a, i + 2, high)",                # 9
]


def quick_sort(values: Sequence[int]) -> List[Step]:
    """Return the full quick sort trace for `values` (which is not modified)."""
    return list(_quick_sort(StepBuilder(values), 0, len(values) - 1))


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def _quick_sort(sb: StepBuilder, low: int, high: int) -> Generator[Step, None, None]:
    if low < high:
        pi = yield from _partition(sb, low, high)
        yield from _quick_sort(sb, low, pi - 1)
        yield from _quick_sort(sb, pi + 1, high)
    elif low == high and sb.mark_sorted(low):
        yield sb.build(
            line=1,
            explanation=f"Range [{low}, {high}] holds a single element ({sb.array[low]}): it is in place.",
        )


def _partition(sb: StepBuilder, low: int, high: int) -> Generator[Step, None, int]:
    """Lomuto partition of a[low..high]. Returns the pivot's final index."""
    a     = sb.array
    pivot = a[high]

    yield sb.build(
        pivot=high,
        line=2,
        explanation=f"Partition [{low}, {high}]: choose the last element {pivot} (index {high}) as pivot.",
    )

    i = low - 1
    for j in range(low, high):
        yield sb.build(
            comparing=(j, high),
            pivot=high,
            line=4,
            explanation=f"Is a[{j}] = {a[j]} smaller than the pivot {pivot}?",
        )

        if a[j] < pivot:
            i += 1
            if i != j:
                yield sb.build(
                    swapping=(i, j),
                    pivot=high,
                    line=5,
                    explanation=f"Yes: move {a[j]} into the 'smaller' zone at index {i}.",
                )
                sb.swap(i, j)
                yield sb.build(pivot=high, line=5, explanation=f"Swapped indices {i} and {j}.")

    slot = i + 1
    if slot != high:
        yield sb.build(
            swapping=(slot, high),
            pivot=high,
            line=6,
            explanation=f"Move the pivot {pivot} into its final slot, index {slot}.",
        )
        sb.swap(slot, high)
        yield sb.build(line=6, explanation=f"Pivot {pivot} placed at index {slot}.")

    sb.mark_sorted(slot)
    yield sb.build(
        line=7,
        explanation=(
            f"Everything left of index {slot} is smaller than {pivot}, "
            f"everything right is not. Index {slot} is final."
        ),
    )
    return slot
