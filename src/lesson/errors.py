class LessonError(Exception):
    """
    Base class of every exception raised by the lesson package.
    """


class InvalidArgument(LessonError, TypeError):
    """
    Raised at the call boundary when `hello_t` receives something it cannot walk (a non-sequence) or a callback that
    cannot take exactly one positional argument.
    """
