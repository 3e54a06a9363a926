from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Type, Union

from hydra.core.config_store import ConfigStore
from loguru import logger

# Register the config types so hydra can instantiate the lesson for us.
# Only terminal classes need a name, since those carry the `_target_` field.
cs = ConfigStore.instance()

_config_groups = {
    "callback",
}


def fullname(ty: Any) -> str:
    """
    Given a class / type this will provide you with the fully qualified package path + name.
    e.g. lesson.hooks.GreetingHook
    """
    module = ty.__module__
    if module == 'builtins':
        return ty.__qualname__
    return module + '.' + ty.__qualname__


def configclass(
        name: Optional[str] = None,
        group: Optional[str] = None,
        target: Optional[Union[Type, Callable]] = None,
        **dataclass_args):
    """
    Turns the decorated class into a dataclass and stores it in hydra's ConfigStore under `group`/`name`.
    If `target` is supplied, a `_target_` field pointing at it is appended so `hydra.utils.instantiate` can build it.
    """
    def mk(config_class):
        if group and group not in _config_groups:
            logger.warning(f"The supplied group for class {config_class} is not in the set of _config_groups")
            logger.warning(f"group {group} / name {name}")

        data_class = dataclass(**dataclass_args)(config_class)

        if target:
            @dataclass
            class _Target(data_class):
                _target_: str = fullname(target)
            _Target.__name__ = data_class.__name__
            _Target.__qualname__ = data_class.__qualname__
            data_class = _Target

        if name:
            cs.store(group=group, name=name, node=data_class)

        return data_class

    return mk
