from dataclasses import field
from typing import Any, Callable, List, Optional, Sequence

from config import configclass
from lesson.visitor import hello_t
from util.hook import HookConfig

from loguru import logger


class Lesson:
    """
    Runs `hello_t` over a list of names, either with the configured callback (the "block") or without one.
    """

    def __init__(
        self,
        names: Sequence[str],
        callback: Optional[Callable[[str], Any]],
        block_given: bool = True,
    ) -> None:
        """
        Args:
            names: The names handed to `hello_t`. Hydra gives us a ListConfig, so this is copied into a list.
            callback: The block. Usually a `Hook` instantiated from the `callback` config group.
            block_given: If False, `hello_t` is called without the callback to show the fallback branch.
        """
        self.names: List[str] = list(names)
        self.callback: Optional[Callable[[str], Any]] = callback
        self.block_given: bool = block_given

    def run(self) -> Optional[Sequence[str]]:
        if self.block_given and self.callback is not None:
            logger.info(f"Calling hello_t with {len(self.names)} name(s) and a block")
            result = hello_t(self.names, self.callback)
        else:
            logger.info("Calling hello_t without a block")
            result = hello_t(self.names)

        logger.info(f"hello_t returned {result!r}")
        return result


@configclass(name="base_lesson", target=Lesson)
class LessonConfig:
    names: List[str] = field(default_factory=lambda: ["Tim", "Tom", "Jim"])
    callback: Optional[HookConfig] = None
    block_given: bool = True
