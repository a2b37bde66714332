"""Core configuration and Pydantic models.

Contains:
- config.py: service constants and environment-driven settings
- models_io.py: response schemas used across routers
"""
