"""Host role tables (SQLAlchemy models and CRUD)."""
