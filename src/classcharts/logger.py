import logging

__all__ = ["setup_logger"]

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HANDLER_NAME = "classcharts"


def setup_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the `classcharts` package logger.

    Calling this more than once only updates the level, it does not add a second handler.
    """
    logger = logging.getLogger("classcharts")
    logger.setLevel(level)

    if not any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    # Keep urllib3 quiet unless explicitly asked for
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    return logger
