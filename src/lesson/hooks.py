from typing import Any, List

from config import configclass
from util.hook import Hook, HookConfig

from loguru import logger


class GreetingHook(Hook[Any]):
    """
    Prints a greeting for every value it receives, e.g. "Hello Tim".
    """

    def __init__(self, greeting: str = "Hello", punctuation: str = "") -> None:
        super().__init__()
        self.greeting: str = greeting
        self.punctuation: str = punctuation

    def on_event(self, value: Any) -> None:
        print(f"{self.greeting} {value}{self.punctuation}")


@configclass(name="greeting_hook", group="callback", target=GreetingHook)
class GreetingHookConfig(HookConfig):
    greeting: str = "Hello"
    punctuation: str = ""


class RecordingHook(Hook[Any]):
    """
    Remembers every value it was called with, in call order.
    """

    def __init__(self) -> None:
        super().__init__()
        self.values: List[Any] = []

    def on_event(self, value: Any) -> None:
        logger.debug(f"Recorded {value!r}")
        self.values.append(value)


@configclass(name="recording_hook", group="callback", target=RecordingHook)
class RecordingHookConfig(HookConfig):
    ...
