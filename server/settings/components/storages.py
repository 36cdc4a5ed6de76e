"""Django storage configuration for S3-compatible backends.

This module configures django-storages to work with:
- MinIO for local development
- AWS S3 or Cloudflare R2 for production

All of them are S3-compatible and use the same S3Storage backend.
Credentials are passed to the backend explicitly so the blob gateway
never reads process state on its own. Missing credentials are allowed
here and reported when an upload grant is requested.
"""

from typing import Any, Final

from server.settings.components import config

# Storage configuration dictionary
# Uses S3-compatible storage for shared files, local storage for static files
STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'server.apps.shares.infrastructure.storage.FileStorage',
        'OPTIONS': {
            'bucket_name': config(
                'AWS_STORAGE_BUCKET_NAME',
                default='shares',
            ),
            'access_key': config('AWS_ACCESS_KEY_ID', default=''),
            'secret_key': config('AWS_SECRET_ACCESS_KEY', default=''),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='us-east-1',
            ),
            # Key prefix inside the bucket
            'location': config('AWS_LOCATION', default=''),
            'custom_domain': config(
                'AWS_S3_CUSTOM_DOMAIN',
                default=None,
            ),
            'file_overwrite': False,  # Prevent accidental overwrites
            'default_acl': None,  # Inherit bucket ACL
            # Public read links carry no signature
            'querystring_auth': False,
        },
    },
    'staticfiles': {
        # Keep static files separate from shared files
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
