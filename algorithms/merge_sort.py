"""
merge_sort.py — Merge Sort
===========================
Generator-based top-down merge sort.  Yields a Step at:
  1. Singleton range reached  →  index joins SORTED (once)
  2. Head of left run vs head of right run  →  COMPARING, in original
     array coordinates (left + i, mid + 1 + j)
  3. Value about to be written at k  →  one-index SWAPPING marker,
     followed by the array after the write
  4. Range [left, right] merged  →  every index in it joins SORTED

SORTED here means "sorted within a finished sub-range", not "in its
final global position".  Indices can appear in SORTED long before the
whole array is done.
"""

from typing import Generator, List, Sequence

from algorithms.step import Step, StepBuilder


PSEUDOCODE: List[str] = [
    "def merge_sort(a, left, right):",               # 0
    "    if left == right: mark a[left] sorted",     # 1
    "    mid ← (left + right) // 2",                 # 2
    "    merge_sort(a, left, mid)",                  # 3
    "    merge_sort(a, mid + 1, right)",             # 4
    "    L ← a[left..mid];  R ← a[mid+1..right]",    # 5
    "    while L and R: compare heads",              # 6
    "        a[k] ← smaller head;  k ← k + 1",       # 7
    "    copy what is left of L, then R",            # 8
    "    mark a[left..right] sorted",                # 9
]


def merge_sort(values: Sequence[int]) -> List[Step]:
    """Return the full merge sort trace for `values` (which is not modified)."""
    return list(_merge_sort(StepBuilder(values), 0, len(values) - 1))


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def _merge_sort(sb: StepBuilder, left: int, right: int) -> Generator[Step, None, None]:
    if left < right:
        mid = (left + right) // 2
        yield from _merge_sort(sb, left, mid)
        yield from _merge_sort(sb, mid + 1, right)
        yield from _merge(sb, left, mid, right)
    elif left == right and sb.mark_sorted(left):
        yield sb.build(
            line=1,
            explanation=f"Range [{left}, {right}] holds a single element ({sb.array[left]}): trivially sorted.",
        )


def _merge(sb: StepBuilder, left: int, mid: int, right: int) -> Generator[Step, None, None]:
    a = sb.array
    L = a[left:mid + 1]
    R = a[mid + 1:right + 1]

    i = j = 0
    k = left

    while i < len(L) and j < len(R):
        yield sb.build(
            comparing=(left + i, mid + 1 + j),
            line=6,
            explanation=f"Compare head of left run ({L[i]}) with head of right run ({R[j]}).",
        )

        if L[i] <= R[j]:
            value = L[i]
            i += 1
        else:
            value = R[j]
            j += 1

        yield sb.build(swapping=(k,), line=7, explanation=f"Write {value} into index {k}.")
        a[k] = value
        k += 1
        yield sb.build(line=7, explanation=f"Index {k - 1} now holds {value}.")

    # drain whichever run still has values
    for run, start in ((L, i), (R, j)):
        for value in run[start:]:
            yield sb.build(swapping=(k,), line=8, explanation=f"Copy remaining {value} into index {k}.")
            a[k] = value
            k += 1
            yield sb.build(line=8, explanation=f"Index {k - 1} now holds {value}.")

    for idx in range(left, right + 1):
        sb.mark_sorted(idx)
    yield sb.build(line=9, explanation=f"Range [{left}, {right}] is merged and in order.")
