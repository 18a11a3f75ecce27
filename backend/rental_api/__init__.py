"""Apartment rental CRUD API."""

__version__ = "0.1.0"
