"""A small book catalogue JSON service with in-memory and PostgreSQL storage."""

__all__ = ["config", "database", "domain", "handlers", "server", "services"]