"""CRUD helpers for the host role tables."""
