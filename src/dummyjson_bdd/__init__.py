"""Behaviour-driven checks for the DummyJSON user API."""

__version__ = "1.0.0"
