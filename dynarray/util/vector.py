import logging
from typing import Any, Optional, List, Iterable, Iterator, TypeVar, Generic, cast
from typing_extensions import Protocol
from abc import ABC, abstractmethod

from dynarray.util.errors import OutOfBounds, EmptyContainer, ContainerReleased


logger = logging.getLogger(__name__)

QUICK_INIT_SIZE = 5


# -----------------------------------------------------------------------------


class _Orderable(Protocol):
    @abstractmethod
    def __lt__(self, other: 'Any') -> 'bool':
        pass


def _precedes(a: '_Orderable', b: '_Orderable') -> 'bool':
    return a < b


_E = TypeVar('_E')


class SequenceBase(Generic[_E], ABC):
    """ Element algorithms shared by all sequence containers.

        Subclasses provide storage through four hooks: the logical
        length and positional element access. Everything else
        (insertion, deletion, search, sorting) is expressed in terms
        of those hooks, so that growing or shrinking of the underlying
        storage is entirely up to `_set_count`.
    """

    @abstractmethod
    def _get_count(self) -> 'int':
        pass

    @abstractmethod
    def _set_count(self, value: 'int') -> 'None':
        pass

    @abstractmethod
    def _get_element(self, index: 'int') -> '_E':
        pass

    @abstractmethod
    def _set_element(self, index: 'int', e: '_E') -> 'None':
        pass

    def append(self, e: '_E') -> 'int':
        """ Adds `e` after the last element and returns its index.
        """
        count = self._get_count()
        self._set_count(count + 1)
        self._set_element(count, e)
        return count

    def get(self, index: 'int') -> '_E':
        return self._get_element(self.__check_index(index))

    def set(self, index: 'int', e: '_E') -> 'None':
        self._set_element(self.__check_index(index), e)

    def insert(self, index: 'int', e: '_E') -> 'None':
        """ Puts `e` at `index`, moving the elements starting from `index`
            one slot to the right. Index equal to the length is accepted
            and makes insertion behave like `append`. A full buffer grows
            before the length changes, so the new slot always exists.
        """
        i = self.__check_index(index, allow_end=True)
        count = self._get_count()
        self._set_count(count + 1)
        for j in range(count, i, -1):
            self._set_element(j, self._get_element(j - 1))
        self._set_element(i, e)

    def delete(self, index: 'int') -> 'None':
        """ Removes the element at `index`, moving all following elements
            one slot to the left.
        """
        i = self.__check_index(index)
        count = self._get_count() - 1
        for j in range(i, count):
            self._set_element(j, self._get_element(j + 1))
        self._set_count(count)

    def remove(self, e: '_E') -> 'int':
        """ Removes every occurrence of `e` and returns how many were removed.
            Relative order of the remaining elements is preserved.
        """
        removed = 0
        i = 0
        while i < self._get_count():
            if self._get_element(i) == e:
                self.delete(i)
                removed += 1
            else:
                i += 1
        return removed

    def pop(self) -> '_E':
        """ Removes the last element and returns it.
        """
        count = self._get_count()
        if count == 0:
            raise EmptyContainer("pop")
        e = self._get_element(count - 1)
        self._set_count(count - 1)
        return e

    def count(self, e: '_E') -> 'int':
        return sum(1 for x in self if x == e)

    def find(self, e: '_E') -> 'Optional[int]':
        for i in range(self._get_count()):
            if self._get_element(i) == e:
                return i
        return None

    def find_last(self, e: '_E') -> 'Optional[int]':
        for i in reversed(range(self._get_count())):
            if self._get_element(i) == e:
                return i
        return None

    def compare(self, other: 'SequenceBase[_E]') -> 'bool':
        """ Checks that both sequences have the same length and hold
            equal elements in the same order.
        """
        if self._get_count() != other._get_count():
            return False
        return all(a == b for a, b in zip(self, other))

    def reverse(self) -> 'None':
        count = self._get_count()
        for i in range(count // 2):
            a, b = self._get_element(i), self._get_element(count - 1 - i)
            self._set_element(i, b)
            self._set_element(count - 1 - i, a)

    def sort(self) -> 'None':
        """ Sorts elements from least to greatest. Equal elements keep
            their relative order.

            Forward scan that steps back after every exchange, so a moved
            element keeps sinking until it meets a smaller one. The scan is
            restarted while a pass still makes exchanges.
        """
        count = self._get_count()
        i, exchanged = 1, False
        while True:
            if i >= count:
                if not exchanged:
                    return
                i, exchanged = 1, False
                continue
            prev, cur = self._get_element(i - 1), self._get_element(i)
            if _precedes(cast(_Orderable, cur), cast(_Orderable, prev)):
                self._set_element(i - 1, cur)
                self._set_element(i, prev)
                exchanged = True
                i = max(i - 1, 1)
            else:
                i += 1

    def sort_descending(self) -> 'None':
        self.sort()
        self.reverse()

    def extend(self, source: 'Iterable[_E]') -> 'None':
        """ Appends all elements of `source` in order. `source` is only read.
        """
        for e in list(source):
            self.append(e)

    def __getitem__(self, index: 'int') -> '_E':
        return self.get(self.__wrap_index(index))

    def __setitem__(self, index: 'int', e: '_E') -> 'None':
        self.set(self.__wrap_index(index), e)

    def __delitem__(self, index: 'int') -> 'None':
        self.delete(self.__wrap_index(index))

    def __contains__(self, e: 'Any') -> 'bool':
        return self.find(e) is not None

    def __iter__(self) -> 'Iterator[_E]':
        return (self._get_element(i) for i in range(self._get_count()))

    def __reversed__(self) -> 'Iterator[_E]':
        return (self._get_element(i) for i in reversed(range(self._get_count())))

    def __len__(self) -> 'int':
        return self._get_count()

    def __eq__(self, other) -> 'bool':
        if not isinstance(other, SequenceBase):
            return NotImplemented
        return self.compare(other)

    def __repr__(self) -> 'str':
        return f"{self.__class__.__name__}({list(self)!r})"

    def __check_index(self, index: 'int', allow_end: 'bool' = False) -> 'int':
        count = self._get_count()
        if index < 0 or index > count or (index == count and not allow_end):
            raise OutOfBounds(index, count)
        return index

    def __wrap_index(self, index: 'int') -> 'int':
        count = self._get_count()
        if -count <= index < 0:
            return index + count
        return index


# -----------------------------------------------------------------------------


class GrowableArray(Generic[_E], SequenceBase[_E]):
    """ Sequence stored in an owned buffer with manual capacity management.

        The buffer grows or shrinks by a fixed growth step, which equals
        the size requested at initialization. At most one step is taken
        per length change (see `rebalance`).

        Released containers raise `ContainerReleased` on every operation
        except `init`, which makes them usable again.
    """

    __buffer: 'Optional[List[Optional[_E]]]'
    __count: 'int'
    __step: 'int'

    def __init__(self, size: 'int' = QUICK_INIT_SIZE) -> 'None':
        super().__init__()
        self.init(size)

    @staticmethod
    def quick() -> 'GrowableArray[Any]':
        """ Creates an empty container when no size estimate is known.
        """
        return GrowableArray(QUICK_INIT_SIZE)

    def init(self, size: 'int') -> 'None':
        """ (Re)initializes the container: empty, with capacity and growth
            step both equal to `size`. Previous contents are dropped.
        """
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.__buffer = [None] * size
        self.__count = 0
        self.__step = size

    def release(self) -> 'None':
        """ Drops the buffer and zeroes all fields.
        """
        self.__live_buffer()
        self.__buffer = None
        self.__count = 0
        self.__step = 0
        logger.debug("released container %#x", id(self))

    @property
    def released(self) -> 'bool':
        return self.__buffer is None

    @property
    def capacity(self) -> 'int':
        return len(self.__live_buffer())

    @property
    def growth_step(self) -> 'int':
        self.__live_buffer()
        return self.__step

    def rebalance(self) -> 'None':
        """ Grows the buffer by one growth step if it is full, or shrinks it
            by one step if more than a whole step of slots is unused.
        """
        buffer = self.__live_buffer()
        capacity = len(buffer)
        if self.__count == capacity:
            buffer.extend([None] * self.__step)
            logger.debug("capacity grew %d -> %d", capacity, len(buffer))
        elif self.__count + self.__step < capacity:
            del buffer[capacity - self.__step:]
            logger.debug("capacity shrank %d -> %d", capacity, len(buffer))

    def copy_to(self, destination: 'GrowableArray[_E]') -> 'GrowableArray[_E]':
        """ Replaces contents of `destination` with copies of this container's
            elements. The growth step of `destination` becomes the current
            capacity of this container.
        """
        if destination is self:
            raise ValueError("cannot copy a container into itself")
        destination.init(self.capacity)
        destination.extend(self)
        return destination

    def copy(self) -> 'GrowableArray[_E]':
        return self.copy_to(GrowableArray(self.capacity))

    def merge(self, source: 'GrowableArray[_E]') -> 'None':
        """ Moves all elements of `source` to the end of this container.
            `source` is released and must not be used afterwards.
        """
        if source is self:
            raise ValueError("cannot merge a container into itself")
        self.extend(source)
        source.release()

    def split(self, index: 'int',
              destination: 'Optional[GrowableArray[_E]]' = None) -> 'GrowableArray[_E]':
        """ Moves elements starting from `index` into `destination` keeping
            their order; this container retains only the elements before
            `index`. The index is clamped to `[0, len(self)]`. If
            `destination` is omitted, a new container is created. Returns
            the destination.
        """
        if destination is self:
            raise ValueError("cannot split a container into itself")
        count = self._get_count()
        index = min(max(index, 0), count)
        size = max(count - index, 1)
        if destination is None:
            destination = GrowableArray(size)
        else:
            destination.init(size)
        while index < self._get_count():
            destination.append(self._get_element(index))
            self.delete(index)
        return destination

    def _get_count(self) -> 'int':
        self.__live_buffer()
        return self.__count

    def _set_count(self, value: 'int') -> 'None':
        buffer = self.__live_buffer()
        count = self.__count
        if value > count:
            self.rebalance()
            self.__count = value
        else:
            self.__count = value
            for i in range(value, count):
                buffer[i] = None
            self.rebalance()
        assert 0 <= self.__count <= len(buffer)

    def _get_element(self, index: 'int') -> '_E':
        return cast(_E, self.__live_buffer()[index])

    def _set_element(self, index: 'int', e: '_E') -> 'None':
        self.__live_buffer()[index] = e

    def __live_buffer(self) -> 'List[Optional[_E]]':
        if self.__buffer is None:
            raise ContainerReleased()
        return self.__buffer

    def __repr__(self) -> 'str':
        if self.released:
            return f"{self.__class__.__name__}(<released>)"
        return super().__repr__()


# -----------------------------------------------------------------------------
