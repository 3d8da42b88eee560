# Database package
from .schema import create_database
from .connection import Database

__all__ = ['create_database', 'Database']
