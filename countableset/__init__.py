from .countable_set import CountableSet, RawEntry, DEFAULT_INITIAL_CAPACITY, DEFAULT_LOAD_FACTOR
from .synchronized import SynchronizedCountableSet

__all__ = [
    'CountableSet',
    'RawEntry',
    'SynchronizedCountableSet',
    'DEFAULT_INITIAL_CAPACITY',
    'DEFAULT_LOAD_FACTOR',
]
