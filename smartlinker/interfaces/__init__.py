"""Interfaces: entry points that drive the services."""
