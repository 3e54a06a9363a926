from lesson.errors import InvalidArgument, LessonError
from lesson.visitor import BoundedSequenceVisitor, NO_BLOCK_NOTICE, Visitor, hello_t
from lesson.hooks import (
    GreetingHook,
    GreetingHookConfig,
    RecordingHook,
    RecordingHookConfig,
)
from lesson.lesson import Lesson, LessonConfig
