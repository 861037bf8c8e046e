"""
Database package para el Backoffice
"""

from .connection import engine, SessionLocal, get_db, create_tables
from .manager import DatabaseManager

__all__ = ['engine', 'SessionLocal', 'get_db', 'create_tables', 'DatabaseManager']
