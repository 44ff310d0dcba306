import logging
import sys
from typing import Optional


def create_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Retorna o logger `name` com um único handler em stderr.

    A saída das demonstrações vai para stdout; logs nunca se misturam a ela.
    """
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
