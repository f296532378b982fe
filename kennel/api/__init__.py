"""
Kennel API

FastAPI application: app factory, routes, dependencies and middleware.

Usage:
======
    from kennel.api.main import app, create_application
"""
