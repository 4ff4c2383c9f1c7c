import sys
from typing import Optional
from typing_extensions import Protocol
from abc import abstractmethod

from dynarray.util.vector import SequenceBase


# -----------------------------------------------------------------------------


class TextSink(Protocol):
    @abstractmethod
    def write(self, text: 'str') -> 'object':
        pass


def render(seq: 'SequenceBase') -> 'str':
    """ Returns textual image of the sequence: `{e0, e1, ..., en}`
        followed by a newline. Elements are read through the
        bounds-checked accessor.
    """
    items = ", ".join(str(seq.get(i)) for i in range(len(seq)))
    return "{" + items + "}\n"


def display(seq: 'SequenceBase', out: 'Optional[TextSink]' = None) -> 'None':
    """ Writes the image of the sequence into `out` (standard output by default).
    """
    (sys.stdout if out is None else out).write(render(seq))


# -----------------------------------------------------------------------------
