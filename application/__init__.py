"""
Application layer for the split planner.

This package contains:
- ports/: Protocol interfaces the services depend on
- exceptions.py: Errors shared by the application and infrastructure layers
"""
