"""Shared, dependency-free building blocks for the split planner."""
