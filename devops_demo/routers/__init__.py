"""Route groups for the DevOps demo service.

This module collects logically-related endpoints:
- health: liveness probe and version report
- errors: canned failure response for error-path testing
"""
