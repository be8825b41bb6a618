import json
import logging
import logging.handlers
import queue

# Thread-safe queue for log records
_log_queue: queue.SimpleQueue = queue.SimpleQueue()

# QueueHandler enqueues log records without blocking the caller
queue_handler = logging.handlers.QueueHandler(_log_queue)

# Console handler to actually emit the logs
console_handler = logging.StreamHandler()

# Listener for the queue; started by configure_logging()
listener = logging.handlers.QueueListener(_log_queue, console_handler)

# Dedicated logger name so we don't clobber the host application's loggers.
# Silent until configured; records propagate to the host's handlers.
logger = logging.getLogger("cassette_serializers")
logger.addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logging(json_logging: bool = False, level: int | None = None) -> None:
    """
    Call this at application startup to send package logs to the console,
    as JSON or text. Records stop propagating to the root logger so each
    one is emitted once.
    """
    if json_logging:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )

    if queue_handler not in logger.handlers:
        logger.addHandler(queue_handler)
        listener.start()
    logger.propagate = False
    logger.setLevel(level if level is not None else logging.INFO)


def shutdown_logging() -> None:
    """
    Stop the console listener and hand records back to the host's handlers.
    """
    if queue_handler in logger.handlers:
        logger.removeHandler(queue_handler)
        listener.stop()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
