"""
Spark API package.

Provides the FastAPI application for the Spark chapter membership service.
The application object lives in api.app (served as "api.app:app").
"""
