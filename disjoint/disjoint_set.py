"""
Disjoint-set (union-find) data structure.

Tracks a partition of hashable elements with:
- find(x): Which block contains x? - O(α(n)) amortized
- union(x, y): Merge the blocks containing x and y - O(α(n)) amortized
- same_set(x, y): Are x and y in the same block? - O(α(n)) amortized
- members(x): Every element of x's block - O(|block|)
- sets(): The whole partition - O(n)

Where α(n) is the inverse Ackermann function (effectively constant ≤ 4).

Entries live in an arena of parallel lists indexed by entry id. Besides the
usual parent/size forest, each block keeps a singly-linked member chain
(chain_next, chain_tail) so that one block can be listed without scanning
the whole universe.
"""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from typing_extensions import Self

Element = TypeVar("Element")

NO_ENTRY = -1


class NotAMember(LookupError):
    """Raised when an operation receives an element that was never added."""

    def __init__(self, value: object) -> None:
        super().__init__(f"{value!r} is not a member of this disjoint set")
        self.value = value


class DisjointSet(Generic[Element]):
    """
    Union-Find with path compression, union by size and member chains.

    Elements must be hashable; None is an ordinary element. Unlike lazily
    initialised variants, every query requires the element to have been
    added first and raises NotAMember otherwise.

    Example:
        >>> ds = DisjointSet([1, 2, 3, 4])
        >>> ds.union(1, 2)
        >>> ds.union(2, 3)
        >>> ds.same_set(1, 3)
        True
        >>> ds.same_set(1, 4)
        False
        >>> sorted(ds.members(3))
        [1, 2, 3]
    """

    def __init__(self, members: Iterable[Element] = ()) -> None:
        self._index: dict[Element, int] = {}
        self._values: list[Element] = []
        self._parent: list[int] = []
        self._size: list[int] = []
        self._chain_next: list[int] = []
        self._chain_tail: list[int] = []
        self._set_count = 0
        self.update(members)

    @classmethod
    def with_capacity(cls, capacity: int) -> Self:
        """Empty structure expecting about `capacity` elements."""
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        # Python lists grow on demand, there is nothing to reserve.
        return cls()

    @classmethod
    def from_iterable(cls, members: Iterable[Element]) -> Self:
        """Every element becomes a singleton; duplicates collapse."""
        return cls(members)

    # =========================================================================
    # Insertion
    # =========================================================================

    def add(self, element: Element) -> None:
        """Insert element as a new singleton block, no-op if present."""
        if element in self._index:
            return
        entry = len(self._values)
        self._index[element] = entry
        self._values.append(element)
        self._parent.append(entry)
        self._size.append(1)
        self._chain_next.append(NO_ENTRY)
        self._chain_tail.append(entry)
        self._set_count += 1

    def update(self, elements: Iterable[Element]) -> None:
        for element in elements:
            self.add(element)

    # =========================================================================
    # Queries
    # =========================================================================

    def contains(self, element: Element) -> bool:
        return element in self._index

    def size(self) -> int:
        """Total number of distinct elements."""
        return len(self._values)

    def set_count(self) -> int:
        """Number of blocks in the partition."""
        return self._set_count

    def find(self, element: Element) -> Element:
        """
        Find the representative of the block containing element.

        Which element represents a block may change after a union, never
        after a find. Only compare representatives with each other.
        """
        return self._values[self._root(self._entry(element))]

    def same_set(self, x: Element, y: Element) -> bool:
        """Check if x and y are in the same block."""
        entry_x = self._entry(x)
        entry_y = self._entry(y)
        return self._root(entry_x) == self._root(entry_y)

    def members(self, element: Element) -> frozenset[Element]:
        """All elements of the block containing element, element included."""
        return frozenset(self._chain(self._root(self._entry(element))))

    def sets(self) -> frozenset[frozenset[Element]]:
        """The partition as a set of blocks."""
        return frozenset(
            frozenset(self._chain(entry))
            for entry, parent in enumerate(self._parent)
            if entry == parent
        )

    def view(self) -> "DisjointSetView[Element]":
        """Read-only view that never compresses paths."""
        return DisjointSetView(self)

    # =========================================================================
    # Union
    # =========================================================================

    def union(self, x: Element, y: Element) -> None:
        """
        Merge the blocks containing x and y.

        The smaller block is grafted under the larger one; on equal sizes
        the block of x keeps its representative. Both elements are looked
        up before anything is modified, so a NotAMember leaves the
        structure untouched.
        """
        entry_x = self._entry(x)
        entry_y = self._entry(y)
        winner = self._root(entry_x)
        loser = self._root(entry_y)

        if winner == loser:
            return

        if self._size[winner] < self._size[loser]:
            winner, loser = loser, winner

        # The loser's tail and size must be read before it is grafted.
        self._chain_next[self._chain_tail[winner]] = loser
        self._chain_tail[winner] = self._chain_tail[loser]
        self._size[winner] += self._size[loser]
        self._parent[loser] = winner
        self._set_count -= 1

    # =========================================================================
    # Internals
    # =========================================================================

    def _entry(self, element: Element) -> int:
        try:
            return self._index[element]
        except KeyError:
            raise NotAMember(element) from None

    def _walk_root(self, entry: int) -> int:
        """Root of entry's tree, leaving the parent pointers untouched."""
        parent = self._parent
        while parent[entry] != entry:
            entry = parent[entry]
        return entry

    def _root(self, entry: int) -> int:
        """
        Root of entry's tree, with path compression.

        Two passes: locate the root, then point every node on the path
        directly at it.
        """
        parent = self._parent
        root = self._walk_root(entry)

        current = entry
        while parent[current] != root:
            next_entry = parent[current]
            parent[current] = root
            current = next_entry

        return root

    def _value(self, entry: int) -> Element:
        return self._values[entry]

    def _chain(self, root: int) -> Iterator[Element]:
        entry = root
        while entry != NO_ENTRY:
            yield self._values[entry]
            entry = self._chain_next[entry]

    def check_invariants(self) -> None:
        """
        Assert the structural invariants of the forest and member chains.

        Walks the whole structure; meant for tests and debugging.
        """
        count = len(self._values)
        assert len(self._index) == count
        roots = [entry for entry in range(count) if self._parent[entry] == entry]
        assert len(roots) == self._set_count

        root_of: list[int] = []
        for entry in range(count):
            current, steps = entry, 0
            while self._parent[current] != current:
                current = self._parent[current]
                steps += 1
                assert steps <= count, f"Cycle in parent graph at entry {entry}"
            root_of.append(current)

        seen: set[int] = set()
        for root in roots:
            chain: list[int] = []
            entry = root
            while entry != NO_ENTRY:
                assert entry not in seen, f"Entry {entry} chained twice"
                seen.add(entry)
                chain.append(entry)
                entry = self._chain_next[entry]
            assert chain[-1] == self._chain_tail[root], f"Stale tail on {root}"
            assert len(chain) == self._size[root], f"Bad size on {root}"
            assert all(root_of[member] == root for member in chain)
        assert len(seen) == count

    # =========================================================================
    # Python protocols
    # =========================================================================

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Element]:
        """Elements in insertion order."""
        return iter(self._values)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(size={len(self._values)}, "
            f"sets={self._set_count})"
        )


class DisjointSetView(Generic[Element]):
    """
    Read-only window on a DisjointSet.

    Finds walk the parent forest without compressing it, so a view never
    mutates the underlying structure. The view is live: unions performed
    on the wrapped set are visible through it.
    """

    def __init__(self, disjoint_set: DisjointSet[Element]) -> None:
        self._disjoint_set = disjoint_set

    def _root(self, element: Element) -> int:
        disjoint_set = self._disjoint_set
        return disjoint_set._walk_root(disjoint_set._entry(element))

    def contains(self, element: Element) -> bool:
        return self._disjoint_set.contains(element)

    def size(self) -> int:
        return self._disjoint_set.size()

    def set_count(self) -> int:
        return self._disjoint_set.set_count()

    def find(self, element: Element) -> Element:
        return self._disjoint_set._value(self._root(element))

    def same_set(self, x: Element, y: Element) -> bool:
        root_x = self._root(x)
        return root_x == self._root(y)

    def members(self, element: Element) -> frozenset[Element]:
        return frozenset(self._disjoint_set._chain(self._root(element)))

    def sets(self) -> frozenset[frozenset[Element]]:
        return self._disjoint_set.sets()

    def __contains__(self, element: object) -> bool:
        return element in self._disjoint_set

    def __len__(self) -> int:
        return len(self._disjoint_set)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._disjoint_set)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._disjoint_set!r})"
