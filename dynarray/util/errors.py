# -----------------------------------------------------------------------------


class ContainerError(Exception):
    """ Base class for errors reported by containers.

        A failed operation leaves the container exactly as it was
        before the call.
    """


class OutOfBounds(ContainerError, IndexError):
    """ Index lies outside of the live part of the container.
    """

    def __init__(self, index: 'int', length: 'int') -> 'None':
        super().__init__(index, length)
        self.__index, self.__length = index, length

    @property
    def index(self) -> 'int':
        """ Returns the offending index as it was passed by the caller.
        """
        return self.__index

    @property
    def length(self) -> 'int':
        """ Returns the length of container at the moment of failure.
        """
        return self.__length

    def __str__(self) -> 'str':
        return f"index {self.index} out of bounds for length {self.length}"


class EmptyContainer(ContainerError, IndexError):
    """ Operation needs at least one element, but the container is empty.
    """

    def __init__(self, operation: 'str') -> 'None':
        super().__init__(operation)
        self.__operation = operation

    @property
    def operation(self) -> 'str':
        """ Returns the name of the operation that failed.
        """
        return self.__operation

    def __str__(self) -> 'str':
        return f"{self.operation} from empty container"


class ContainerReleased(ContainerError, RuntimeError):
    def __str__(self) -> 'str':
        return "container has been released"


# -----------------------------------------------------------------------------
