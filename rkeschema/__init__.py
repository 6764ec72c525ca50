"""Typed RKE cluster configuration sections and their conversion to and from flat schema data."""

__version__ = "0.1.0"