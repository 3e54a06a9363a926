from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass


class Hook[T]:
    """
    An object-shaped callback. Calling a hook with a single value forwards it to `on_event`, so a hook can be handed
    to anything that expects a one-argument callable.
    """

    def __init__(self) -> None:
        ...

    @abstractmethod
    def on_event(self, value: T) -> None:
        ...

    def __call__(self, value: T) -> None:
        self.on_event(value)


@dataclass
class HookConfig:
    ...
