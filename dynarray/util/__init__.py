from dynarray.util.errors import ContainerError, OutOfBounds, EmptyContainer, ContainerReleased
from dynarray.util.vector import SequenceBase, GrowableArray, QUICK_INIT_SIZE
from dynarray.util.display import TextSink, render, display
