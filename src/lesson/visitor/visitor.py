from abc import abstractmethod


class Visitor[S, R]:
    """
    A simple visitor interface. A subject of type `S` should be visited (order to be defined in the implementing
    classes) and yield a result of type R - which may be None.
    """

    def __init__(self, subject: S) -> None:
        self.subject: S = subject

    @abstractmethod
    def visit(self, *args, **kwargs) -> R: ...
