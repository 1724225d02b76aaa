import logging
import logging.handlers
import sys

LOGGER_NAME = 'Encoder Logger'
LOG_FORMAT = '[[%(asctime)s] %(message)s'

def getLogger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return the shared encoder logger (no handlers attached)."""
    return logging.getLogger(name)

def setupLogger(queue=None, name: str = LOGGER_NAME, level: str = 'INFO', fmt: str = LOG_FORMAT):
    """Setup the logger to send logs to a queue, or to stderr when no queue is given."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.getLevelName(level.upper()))

    # Prevent adding multiple handlers
    if queue is not None:
        if not any(isinstance(h, logging.handlers.QueueHandler) for h in logger.handlers):
            logger.addHandler(logging.handlers.QueueHandler(queue))
    elif not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    return logger

def loggerListener(queue, logfile: str = 'log.log', fmt: str = LOG_FORMAT):
    """Process that listens to the queue and writes logs to a file."""
    handler = logging.FileHandler(logfile, mode='w')
    handler.setFormatter(logging.Formatter(fmt))

    logger = logging.getLogger('listener')
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)

    try:
        while True:
            # Get log record from the queue
            record = queue.get()
            # Sentinel value to stop the listener
            if record is None:
                break
            logger.handle(record)
    finally:
        logger.removeHandler(handler)
        handler.close()
