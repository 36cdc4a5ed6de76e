"""Main settings file for the project.

Settings are split into components (``server/settings/components``)
and assembled here with ``django-split-settings``.
"""

import django_stubs_ext
from split_settings.tools import include

# Allows generic admin classes such as ``ModelAdmin[FileRecord]``
django_stubs_ext.monkeypatch()

include(
    'components/common.py',
    'components/logging.py',
    'components/storages.py',
)
