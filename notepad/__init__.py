"""
Notepad API.

- api/: HTTP routers (auth, notes, archive, health)
- core/: configuration, logging, storage handle, security, error handling
- models/: SQLAlchemy models (User, Note, ArchivedNote)
- repositories/: owner-scoped data access
- schemas/: Pydantic request and response schemas
- services/: credential store, note lifecycle and archive transitions
"""
