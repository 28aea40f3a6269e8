import logging
from collections import Counter
from operator import itemgetter
from typing import Generic, Hashable, Iterable, Iterator, NamedTuple, Optional, TypeVar
from multiset import FrozenMultiset

_T = TypeVar('_T', bound=Hashable)

DEFAULT_INITIAL_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75

logger = logging.getLogger(__name__)


class RawEntry(NamedTuple, Generic[_T]):
    element: _T
    count: int


def _check_capacity(initial_capacity: int) -> int:
    if isinstance(initial_capacity, bool) or not isinstance(initial_capacity, int):
        raise TypeError(f'The initial capacity must be an integer, got {type(initial_capacity).__name__}.')
    if initial_capacity < 0:
        raise ValueError(f'The initial capacity must not be negative: {initial_capacity}.')
    return initial_capacity


def _check_load_factor(load_factor: float) -> float:
    if isinstance(load_factor, bool) or not isinstance(load_factor, (int, float)):
        raise TypeError(f'The load factor must be a number, got {type(load_factor).__name__}.')
    if not load_factor > 0:
        raise ValueError(f'The load factor must be positive: {load_factor}.')
    return float(load_factor)


class CountableSet(Generic[_T]):
    """A set that keeps a count of its elements.

    Adding the same element twice leaves the set with a single distinct member whose count is 2,
    so :meth:`size` is 1 while :meth:`length` is 2:

    .. code-block:: python
        cs = CountableSet[str]()
        cs.add('e1')
        cs.add('e1')
        cs.size()    #--> 1
        cs.length()  #--> 2

    Every stored count is strictly positive: an element whose count drops to zero is removed.
    Iteration yields each distinct element once, in the order its key was first inserted.

    The sizing hints ``initial_capacity`` and ``load_factor`` are validated and kept for callers
    that inspect them, but the backing :class:`dict` does not expose pre-sizing, so they never
    change the observable behaviour.

    Instances are not thread-safe: see :class:`countableset.synchronized.SynchronizedCountableSet`.
    """

    __slots__ = ('_elements', '_total', '_initial_capacity', '_load_factor')
    _elements: Counter[_T]
    _total: int
    _initial_capacity: int
    _load_factor: float

    def __init__(
        self,
        iterable: Optional[Iterable[_T]] = None,
        *,
        initial_capacity: Optional[int] = None,
        load_factor: Optional[float] = None,
        _internal: Optional[Counter[_T]] = None,
    ):
        assert iterable is None or _internal is None, "Either 'iterable' or '_internal' must be provided, not both."
        self._initial_capacity = _check_capacity(initial_capacity) if initial_capacity is not None else DEFAULT_INITIAL_CAPACITY
        self._load_factor = _check_load_factor(load_factor) if load_factor is not None else DEFAULT_LOAD_FACTOR
        if initial_capacity is not None or load_factor is not None:
            logger.debug(
                'Sizing hints for %s accepted as hints only: initial_capacity=%r, load_factor=%r',
                self.__class__.__name__,
                initial_capacity,
                load_factor,
            )
        if _internal is not None:
            self._elements = _internal
            self._total = self._elements.total()
        else:
            self._elements = Counter[_T]()
            self._total = 0
            if iterable is not None:
                self.add_all(iterable)

    @classmethod
    def with_capacity(cls, initial_capacity: int, load_factor: float = DEFAULT_LOAD_FACTOR):
        "Creates an empty set with explicit sizing hints."
        return cls(initial_capacity=initial_capacity, load_factor=load_factor)

    @property
    def initial_capacity(self) -> int:
        return self._initial_capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def add(self, element: _T) -> bool:
        """
        Adds one occurrence of the element, inserting it with count 1 when absent.

        Always returns ``True``.
        """
        self._elements[element] += 1
        self._total += 1
        return True

    def add_with_count(self, element: _T, count: int) -> bool:
        """
        Adds ``count`` occurrences of the element at once.

        Raises ``ValueError`` when ``count`` is not positive, leaving the set untouched.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f'The quantity must be an integer, got {type(count).__name__}.')
        if count <= 0:
            raise ValueError('The quantity must be positive.')
        self._elements[element] += count
        self._total += count
        return True

    def add_all(self, elements: Iterable[_T]) -> bool:
        """
        Adds every element of the iterable, one occurrence each, in iteration order.

        Returns ``True`` if the length of the set changed, that is if the iterable was not empty.
        """
        previous_length = self._total
        for element in elements:
            self.add(element)
        return self._total != previous_length

    def remove(self, element: _T) -> bool:
        """
        Removes one occurrence of the element.

        An element with a count greater than 1 stays in the set with its count decreased,
        an element with count 1 leaves the set. Returns ``False`` if the element is not a member.
        """
        count = self._elements.get(element)
        if count is None:
            return False
        if count > 1:
            self._elements[element] = count - 1
        else:
            del self._elements[element]
        self._total -= 1
        return True

    def delete(self, element: _T) -> bool:
        """
        Deletes the element regardless of its count.

        Returns ``False`` if the element is not a member.
        """
        count = self._elements.pop(element, None)
        if count is None:
            return False
        self._total -= count
        return True

    def get_raw(self, element: _T) -> Optional[RawEntry[_T]]:
        count = self._elements.get(element)
        if count is None:
            return None
        return RawEntry(element, count)

    def get(self, element: _T) -> Optional[int]:
        return self._elements.get(element)

    def size(self) -> int:
        "Returns the number of distinct elements (the cardinality)."
        return len(self._elements)

    def length(self) -> int:
        "Returns the sum of the counts of all elements."
        return self._total

    def is_empty(self) -> bool:
        return not self._elements

    def get_sorted_elements_by_count(self, descending: bool = False) -> dict[_T, int]:
        """
        Returns a dict of every element and its count, ordered by count.

        Elements with the same count keep their insertion order, whichever the direction.
        """
        return dict(sorted(self._elements.items(), key=itemgetter(1), reverse=descending))

    def clear(self) -> None:
        self._elements.clear()
        self._total = 0

    def to_multiset(self) -> FrozenMultiset:
        "Returns a snapshot of the set as a frozen multiset."
        return FrozenMultiset(dict(self._elements))

    def copy(self):
        result = self.__class__(_internal=self._elements.copy())
        result._initial_capacity = self._initial_capacity
        result._load_factor = self._load_factor
        return result

    __copy__ = copy

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __iter__(self) -> Iterator[_T]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CountableSet):
            return self._total == other._total and self._elements == other._elements
        return False

    __hash__ = None  # type: ignore

    def __str__(self) -> str:
        items = ', '.join('%r: %r' % item for item in self._elements.items())
        return '{%s}' % items

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self})'

    def __getstate__(self):
        return {
            'elements': dict(self._elements),
            'initial_capacity': self._initial_capacity,
            'load_factor': self._load_factor,
        }

    def __setstate__(self, state):
        self._elements = Counter[_T](state['elements'])
        self._total = self._elements.total()
        self._initial_capacity = state['initial_capacity']
        self._load_factor = state['load_factor']
