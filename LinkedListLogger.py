import itertools
import logging

_instanceCounter = itertools.count()


def BuildLogger(name, logFile=None, logLevel=logging.WARNING, logger: logging.Logger = None):
    """
    Create (or pass through) the logger used by one linked list instance.

    Each call returns a new child of the named logger, so the level and file
    handler of one list never affect another. Records still propagate to the
    named parent logger.

    Args:
        name (str): Name of the parent logger, e.g. "SINGLY_LINKED_LIST".
        logFile (str, optional): Path to log file. Defaults to None.
        logLevel (int, optional): Logging level. Defaults to logging.WARNING.
        logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.

    Returns:
        logging.Logger: The logger to use.
    """
    if logger is not None:
        return logger

    # Counter rather than id(): ids are reused once a list is garbage collected.
    logger = logging.getLogger(name).getChild(str(next(_instanceCounter)))
    logger.setLevel(logLevel)

    if logFile is not None:
        file_handler = logging.FileHandler(logFile)
        file_handler.setLevel(logLevel)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler.setFormatter(formatter)

        logger.addHandler(file_handler)

    return logger
