"""
Database Module

This module provides database connectivity and session management for Kennel.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (from Database.session())
        │  - One session per request
        │  - Auto-commit on success, auto-rollback on exception
        ▼
    DogRepository
        │  SQL Queries
        ▼
    PostgreSQL / SQLite

Usage:
======
    from kennel.shared.db import Database

    database = Database.from_settings(settings)
    await database.connect()
"""

from kennel.shared.db.session import Database

__all__ = [
    "Database",
]
