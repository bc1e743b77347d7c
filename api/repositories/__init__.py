"""
API Repositories - Data access abstraction layer

Provides a clean interface for document storage that can be swapped
between local file storage (current) and database (future).

Pattern: Repository Pattern
"""
