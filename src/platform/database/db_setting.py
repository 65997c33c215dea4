"""
Database configuration re-exports

Import from here in models, scripts and tests.
"""

from src.platform.database.orm_db_setting import (
    Base,
    Database,
    create_db_and_tables,
    dispose_engine,
    get_engine,
    get_session_maker,
    verify_schema,
)

__all__ = [
    'Base',
    'Database',
    'create_db_and_tables',
    'dispose_engine',
    'get_engine',
    'get_session_maker',
    'verify_schema',
]
