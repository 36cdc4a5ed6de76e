"""Business logic layer for shares app.

This package contains all business logic for shared files:
- Upload request and finalize handshake
- File record persistence
- Link resolution and stats

All business logic should be implemented here, separate from
models (data layer), infrastructure (external systems) and views.
"""
