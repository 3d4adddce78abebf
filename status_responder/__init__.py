"""Stateless HTTP service answering every request with a host/time status snapshot."""

__version__ = "0.1.0"
