import logging
import os

from colorlog import ColoredFormatter

DEFAULT_LEVEL = "INFO"

# Loggers de bibliotecas que poluem o console em nível INFO
NOISY_LOGGERS = ("uvicorn.access", "httpx")


def resolve_level(level=None) -> int:
    """Converte nome ou número de nível; nomes desconhecidos viram INFO."""
    if level is None:
        level = os.getenv("LOG_LEVEL") or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(level=None, quiet=NOISY_LOGGERS):
    level = resolve_level(level)

    logger = logging.getLogger()
    logger.setLevel(level)

    # Evitar handlers duplicados (API e CLI podem chamar mais de uma vez)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = ColoredFormatter(
        "%(log_color)s%(levelname)-8s%(reset)s | "
        "%(blue)s%(asctime)s%(reset)s | "
        "%(green)s%(name)s%(reset)s | "
        "%(message)s",
        datefmt="%d-%m-%Y %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "white",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red,bg_white",
        },
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logger
