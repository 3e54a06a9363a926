from collections.abc import Sequence
import inspect
from typing import Any, Callable, Optional

from lesson.errors import InvalidArgument
from lesson.visitor.visitor import Visitor

from loguru import logger

NO_BLOCK_NOTICE: str = "No block given"


class BoundedSequenceVisitor[T](Visitor[Sequence[T], Optional[Sequence[T]]]):
    """
    Hands every element of a finite sequence, in index order, to a caller supplied callback. This is the python
    equivalent of a method that `yield`s each element to the block it was called with.

    If no callback is supplied, a notice is emitted through `notice` instead and nothing is returned.
    """

    def __init__(self, sequence: Sequence[T], notice: Callable[[str], Any] = print) -> None:
        """
        Args:
            sequence: The sequence to walk. It is never copied or modified.
            notice: Where the "no callback" notice goes. Defaults to stdout.
        """
        if not isinstance(sequence, Sequence):
            raise InvalidArgument(f"Expected a sequence, got {type(sequence).__name__}")

        super().__init__(sequence)
        self.notice: Callable[[str], Any] = notice

    @property
    def sequence(self) -> Sequence[T]:
        return self.subject

    def visit(self, callback: Optional[Callable[[T], Any]] = None) -> Optional[Sequence[T]]:
        """
        Args:
            callback: Invoked once per element with that element as its only argument. `None` means no callback was
              given.

        Returns:
            The very same sequence object when a callback was given, otherwise `None`.
        """
        if callback is None:
            logger.debug("No callback supplied, emitting notice")
            self.notice(NO_BLOCK_NOTICE)
            return None

        check_callback(callback)

        # The element count is fixed when the walk starts, even if the callback grows the sequence.
        count = len(self.sequence)
        logger.debug(f"Visiting {count} element(s)")

        for index in range(count):
            callback(self.sequence[index])

        return self.sequence


def check_callback(callback: Any) -> None:
    """
    Raises `InvalidArgument` unless `callback` can be called with exactly one positional argument. Callables that
    carry no introspectable signature are let through.
    """
    if not callable(callback):
        raise InvalidArgument(f"Callback must be callable, got {type(callback).__name__}")

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return

    try:
        signature.bind(None)
    except TypeError as e:
        raise InvalidArgument(f"Callback {callback!r} must accept exactly one argument: {e}") from e


def hello_t[T](
    sequence: Sequence[T],
    callback: Optional[Callable[[T], Any]] = None,
    notice: Callable[[str], Any] = print,
) -> Optional[Sequence[T]]:
    """
    Calls `callback` with each element of `sequence` and returns `sequence`. Without a callback, prints a notice and
    returns `None`.

    >>> hello_t(["Tim", "Tom", "Jim"], lambda name: print(f"Hello {name}"))
    Hello Tim
    Hello Tom
    Hello Jim
    ['Tim', 'Tom', 'Jim']
    """
    return BoundedSequenceVisitor(sequence, notice=notice).visit(callback)
