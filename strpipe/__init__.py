"""Threaded pipeline of string transforms connected by bounded queues."""

__version__ = "0.1.0"
__all__ = ["channel", "cli", "monitor", "plugin", "transforms"]