# Core package
from .config import AcceptanceConfig
from .exceptions import (
    CatalogAcceptanceError,
    ElementNotReadyError,
    InvalidStateError,
    UnexpectedDomShapeError,
)
from .logger_config import setup_logger

__all__ = [
    'AcceptanceConfig',
    'CatalogAcceptanceError',
    'ElementNotReadyError',
    'InvalidStateError',
    'UnexpectedDomShapeError',
    'setup_logger',
]
