from .database import Collection, Database, Document

__all__ = ["Collection", "Database", "Document"]
