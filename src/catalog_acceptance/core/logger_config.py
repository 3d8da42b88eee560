"""
Logging setup for catalog acceptance helpers
Format: YYYY-MM-DD HH:MM:SS - [Module] - [Source] - Description
"""

import logging
from datetime import datetime


class AcceptanceFormatter(logging.Formatter):
    """Custom formatter with module and source context"""

    colors = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m'  # Magenta
    }
    reset = '\033[0m'

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        # Module defaults to the last segment of the logger name
        module = getattr(record, 'module_name', record.name.rsplit('.', 1)[-1].upper())
        source = getattr(record, 'source', 'CORE')

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        formatted = f"{timestamp} - [{module}] - [{source}] - {record.getMessage()}"

        if not self.use_color:
            return formatted

        color = self.colors.get(record.levelname, '')
        return f"{color}{formatted}{self.reset}"


def setup_logger(name='catalog_acceptance', level=logging.INFO, use_color=True):
    """Attach a console handler to the package logger"""
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(AcceptanceFormatter(use_color=use_color))

    logger.addHandler(console_handler)

    return logger
