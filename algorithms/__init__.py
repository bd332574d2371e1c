"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting engine the visualizer knows about.

    from algorithms import REGISTRY, get_sorting_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, pseudocode, description),
        …
    }

Each `fn` is an engine: a pure function taking a sequence of ints and
returning the complete list of Steps.  Adding a new sort is: write the
engine module, add one entry here.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from algorithms.step import Step

# ---------------------------------------------------------------------------
# Import all engine modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort    import bubble_sort    as _bubble,    PSEUDOCODE as _bubble_pc
from algorithms.insertion_sort import insertion_sort as _insertion, PSEUDOCODE as _insertion_pc
from algorithms.selection_sort import selection_sort as _selection, PSEUDOCODE as _selection_pc
from algorithms.merge_sort     import merge_sort     as _merge,     PSEUDOCODE as _merge_pc
from algorithms.quick_sort     import quick_sort     as _quick,     PSEUDOCODE as _quick_pc


logger = logging.getLogger(__name__)

Engine = Callable[[Sequence[int]], List[Step]]

DEFAULT_ALGORITHM = "bubble"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:         str            # registry key, e.g. "bubble"
    label:       str            # human label, e.g. "Bubble Sort"
    fn:          Engine         # the engine function
    pseudocode:  List[str]      # lines for the side-panel
    description: str = ""       # one-liner for the UI card


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble, pseudocode=_bubble_pc,
        description="Repeatedly swaps adjacent pairs; big values bubble to the end.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion, pseudocode=_insertion_pc,
        description="Grows a sorted prefix, sliding each new value left into place.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection, pseudocode=_selection_pc,
        description="Finds the minimum of the unsorted part and swaps it to the front.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge, pseudocode=_merge_pc,
        description="Splits in halves, sorts each, then merges the sorted runs.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick, pseudocode=_quick_pc,
        description="Partitions around the last element, then sorts both sides.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key.  Unknown keys fall back to bubble sort."""
    info = REGISTRY.get(key)
    if info is None:
        logger.warning("Unknown algorithm %r, falling back to %s", key, DEFAULT_ALGORITHM)
        info = REGISTRY[DEFAULT_ALGORITHM]
    return info


def get_sorting_algorithm(key: str) -> Engine:
    """Return the engine function for `key` (bubble sort when unknown)."""
    return get_algorithm(key).fn


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "DEFAULT_ALGORITHM",
    "Engine",
    "get_algorithm",
    "get_sorting_algorithm",
    "list_algorithms",
]
