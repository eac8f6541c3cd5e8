"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from.
This is separate to avoid circular imports.
"""

from flask_sqlalchemy import SQLAlchemy

# Create the SQLAlchemy instance
# This will be initialized with the Flask app in app.py
db = SQLAlchemy()


class DefaultsMixin:
    """
    Fill unset constructor arguments from a defaults table.

    Column defaults only apply on flush; the cost engine prices transient
    instances too, so the values must be present from construction.
    """
    __defaults__ = {}

    def __init__(self, **kwargs):
        for key, value in self.__defaults__.items():
            kwargs.setdefault(key, value)
        super().__init__(**kwargs)
