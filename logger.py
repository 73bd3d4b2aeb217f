import logging

import config

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(config.LOG_LEVEL)

# Clear any existing handlers to avoid duplicate logs under uvicorn reloads
if root_logger.handlers:
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
root_logger.addHandler(handler)

# Third-party loggers that are too chatty at DEBUG
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)
logging.getLogger("aiosqlite").setLevel(logging.WARNING)
logging.getLogger("sqlalchemy.engine").setLevel(
    logging.INFO if config.DATABASE_ECHO else logging.WARNING
)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
