import os

# Keep Kivy from parsing our command line.
os.environ.setdefault("KIVY_NO_ARGS", "1")

from kivy.logger import Logger as logger  # noqa: E402

from . import playground  # noqa: E402
from .config import load_config  # noqa: E402


def main():
    cfg = load_config()
    logger.setLevel(cfg.get("logging", "level", fallback="INFO").upper())

    for line in playground.run(cfg):
        logger.info(f"ClosurePlay: {line}")


if __name__ == "__main__":
    main()
