from dynarray.util import \
    ContainerError, OutOfBounds, EmptyContainer, ContainerReleased, \
    SequenceBase, GrowableArray, QUICK_INIT_SIZE, \
    TextSink, render, display
