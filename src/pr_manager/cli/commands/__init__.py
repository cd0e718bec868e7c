"""Workflow commands."""
