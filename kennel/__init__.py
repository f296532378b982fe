"""
Kennel Backend

CRUD HTTP service for Dog records.

Package Structure:
==================
    kennel/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    kennel-api

    # Or directly with uvicorn
    uvicorn kennel.api.main:app --reload
"""
