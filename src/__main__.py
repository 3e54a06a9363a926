import sys

# Importing `lesson` registers its config classes before hydra composes the config.
from lesson import LessonConfig

from hydra.utils import instantiate
import hydra

import loguru

loguru.logger.remove()
loguru.logger.add(
    sys.stderr,
    format="| <level>{level: <6}</level>| <cyan>{name}.{function}</cyan>:<yellow>{line}</yellow> | {message}"
)


# Default config file is "conf/lesson/conf.yaml"
@hydra.main(version_base=None, config_path="../conf/lesson", config_name="conf")
def main(cfg: LessonConfig) -> None:
    instantiate(cfg).run()


if __name__ == "__main__":
    main()
