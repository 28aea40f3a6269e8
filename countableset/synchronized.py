import threading
from collections import Counter
from typing import Hashable, Iterable, Iterator, Optional, TypeVar
from multiset import FrozenMultiset
from .countable_set import CountableSet, RawEntry

_T = TypeVar('_T', bound=Hashable)


class SynchronizedCountableSet(CountableSet[_T]):
    """
    A :class:`CountableSet` whose operations are guarded by a reentrant lock.

    Each call is atomic with respect to the other calls on the same instance, ``add_all`` included.
    Iterating yields a snapshot of the distinct elements taken when the iterator is created,
    so the set can be mutated by other threads while a caller is iterating.
    """

    __slots__ = ('_lock',)
    _lock: threading.RLock

    def __init__(
        self,
        iterable: Optional[Iterable[_T]] = None,
        *,
        initial_capacity: Optional[int] = None,
        load_factor: Optional[float] = None,
        _internal: Optional[Counter[_T]] = None,
    ):
        self._lock = threading.RLock()
        super().__init__(
            iterable,
            initial_capacity=initial_capacity,
            load_factor=load_factor,
            _internal=_internal,
        )

    def add(self, element: _T) -> bool:
        with self._lock:
            return super().add(element)

    def add_with_count(self, element: _T, count: int) -> bool:
        with self._lock:
            return super().add_with_count(element, count)

    def add_all(self, elements: Iterable[_T]) -> bool:
        with self._lock:
            return super().add_all(elements)

    def remove(self, element: _T) -> bool:
        with self._lock:
            return super().remove(element)

    def delete(self, element: _T) -> bool:
        with self._lock:
            return super().delete(element)

    def get_raw(self, element: _T) -> Optional[RawEntry[_T]]:
        with self._lock:
            return super().get_raw(element)

    def get(self, element: _T) -> Optional[int]:
        with self._lock:
            return super().get(element)

    def size(self) -> int:
        with self._lock:
            return super().size()

    def length(self) -> int:
        with self._lock:
            return super().length()

    def is_empty(self) -> bool:
        with self._lock:
            return super().is_empty()

    def get_sorted_elements_by_count(self, descending: bool = False) -> dict[_T, int]:
        with self._lock:
            return super().get_sorted_elements_by_count(descending)

    def clear(self) -> None:
        with self._lock:
            super().clear()

    def to_multiset(self) -> FrozenMultiset:
        with self._lock:
            return super().to_multiset()

    def copy(self):
        with self._lock:
            return super().copy()

    __copy__ = copy

    def __contains__(self, element: object) -> bool:
        with self._lock:
            return super().__contains__(element)

    def __iter__(self) -> Iterator[_T]:
        with self._lock:
            snapshot = list(self._elements)
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()

    def __bool__(self) -> bool:
        with self._lock:
            return super().__bool__()

    def __eq__(self, other: object) -> bool:
        with self._lock:
            return super().__eq__(other)

    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        with self._lock:
            return super().__str__()

    def __getstate__(self):
        with self._lock:
            return super().__getstate__()

    def __setstate__(self, state):
        self._lock = threading.RLock()
        super().__setstate__(state)
