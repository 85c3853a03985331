"""Database access and schema migrations."""
