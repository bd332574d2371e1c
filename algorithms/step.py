"""
step.py — Sorting Step Snapshot
================================
Every sorting engine walks a private generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one bar-chart frame:

    • The full array, exactly as it looks right now
    • Which indices are being compared / swapped
    • Which indices are already in sorted position
    • The pivot index (quick sort only)
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened
      (Learning Mode reads this)

Design decisions:
  - Step is a frozen dataclass.  Every collection passed in is copied
    into a tuple on construction, so the engine can keep mutating its
    working list without rewriting frames it already emitted.
  - `sorted` keeps the order the engine added indices in (bubble
    prepends, the others append).  Renderers treat it as a set.
  - `comparing` and `swapping` are also used as generic highlights:
    selection sort marks a new minimum with a one-index `comparing`,
    merge sort marks the slot being written with a one-index `swapping`.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        array           : Snapshot of the whole array.
        comparing       : 0–2 indices being compared (or highlighted).
        swapping        : 0–2 indices being exchanged (or written).
        sorted          : Indices confirmed in sorted position so far.
        pivot           : Index of the partition pivot, or None.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text for Learning Mode.
    """

    array:            Tuple[int, ...]              = ()
    comparing:        Tuple[int, ...]              = ()
    swapping:         Tuple[int, ...]              = ()
    sorted:           Tuple[int, ...]              = ()
    pivot:            Optional[int]                = None
    pseudocode_line:  int                          = 0
    explanation:      str                          = ""

    def __post_init__(self):
        # frozen: copy through object.__setattr__
        object.__setattr__(self, "array", tuple(self.array))
        object.__setattr__(self, "comparing", tuple(self.comparing))
        object.__setattr__(self, "swapping", tuple(self.swapping))
        object.__setattr__(self, "sorted", tuple(self.sorted))

    def to_dict(self) -> dict:
        return {
            "array":           list(self.array),
            "comparing":       list(self.comparing),
            "swapping":        list(self.swapping),
            "sorted":          list(self.sorted),
            "pivot":           self.pivot,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


# ---------------------------------------------------------------------------
# Convenience builder so engines don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Mutable scratch-pad that engines use to construct Steps cleanly.
    It owns the working copy of the array and the running sorted list.

    Usage inside an engine generator:
        sb = StepBuilder(values)
        yield sb.build(comparing=(0, 1), line=3, explanation="Compare 5 and 3.")
        sb.swap(0, 1)
        sb.mark_sorted(3, first=True)
        yield sb.build(line=6)
    """

    def __init__(self, values: Sequence[int], sorted_indices: Sequence[int] = ()):
        self.array:  List[int] = list(values)
        self.sorted: List[int] = list(sorted_indices)

    def __len__(self) -> int:
        return len(self.array)

    # -- helpers --
    def swap(self, i: int, j: int) -> None:
        self.array[i], self.array[j] = self.array[j], self.array[i]

    def mark_sorted(self, index: int, first: bool = False) -> bool:
        """Add `index` to the sorted list unless present. Returns True if added."""
        if index in self.sorted:
            return False
        if first:
            self.sorted.insert(0, index)
        else:
            self.sorted.append(index)
        return True

    def build(
        self,
        comparing: Sequence[int] = (),
        swapping: Sequence[int] = (),
        pivot: Optional[int] = None,
        line: int = 0,
        explanation: str = "",
    ) -> Step:
        return Step(
            array=self.array,
            comparing=comparing,
            swapping=swapping,
            sorted=self.sorted,
            pivot=pivot,
            pseudocode_line=line,
            explanation=explanation,
        )
