"""
Disjoint-set (union-find) structures.

**DisjointSet** (disjoint_set.py)
    Partition of hashable elements with union by size, path compression
    and per-block member chains.
    - add / update / contains
    - find / same_set / union
    - members / sets / set_count

**DisjointSetView** (disjoint_set.py)
    Read-only window that answers the same queries without path compression.

**NotAMember**
    LookupError raised when a query names an element that was never added.
"""

from .disjoint_set import DisjointSet, DisjointSetView, NotAMember

__all__ = [
    "DisjointSet",
    "DisjointSetView",
    "NotAMember",
]
