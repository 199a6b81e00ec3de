"""Athlete training load and readiness model."""

__version__ = "0.1.0"
