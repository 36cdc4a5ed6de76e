"""Infrastructure layer for shares app.

This package contains integrations with external systems:
- Custom storage backend (S3/MinIO/R2) acting as the blob gateway
- Slug and object name generation

Keep infrastructure concerns separate from business logic.
"""
