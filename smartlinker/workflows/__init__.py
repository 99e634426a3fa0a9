"""Workflows: multi-step use cases composed from components."""
