"""logging setup shared by the shell, demo and API entry points"""
import logging
from typing import Union
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """configure default logging if no handlers are present"""
    root = logging.getLogger()
    if root.handlers:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler()],
    )
