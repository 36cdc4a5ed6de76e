"""Generators for public slugs and storage object names."""

import re
import secrets
import string
import time
from typing import Final

SLUG_LENGTH: Final = 8
_SLUG_ALPHABET: Final = string.ascii_letters + string.digits

_SUFFIX_LENGTH: Final = 6
_SUFFIX_ALPHABET: Final = string.digits + string.ascii_lowercase

_UNSAFE_CHARS: Final = re.compile(r'[^A-Za-z0-9\-_]')


def new_slug() -> str:
    """Generate a random public slug.

    Uniqueness is not guaranteed here; it is enforced by the
    primary key of the file record table.

    Returns:
        8-character string drawn from 62 alphanumeric symbols.
    """
    return ''.join(
        secrets.choice(_SLUG_ALPHABET) for _ in range(SLUG_LENGTH)
    )


def split_filename(filename: str) -> tuple[str, str]:
    """Split filename into basename and extension.

    The extension starts at the last dot. A dot in the first position
    (e.g. '.env') does not start an extension.

    Args:
        filename: Original client filename.

    Returns:
        Tuple of (basename, extension including the dot or '').
    """
    dot_index = filename.rfind('.')
    if dot_index <= 0:
        return filename, ''
    return filename[:dot_index], filename[dot_index:]


def sanitize_basename(basename: str) -> str:
    """Replace every character outside [A-Za-z0-9-_] with '_'.

    Args:
        basename: Filename without extension.

    Returns:
        Sanitized basename of the same length.
    """
    return _UNSAFE_CHARS.sub('_', basename)


def new_object_name(filename: str) -> str:
    """Generate a storage key for an upload.

    Shape: '<epoch-ms>_<random-suffix>_<sanitized-basename><extension>'.
    The extension is kept verbatim.

    Args:
        filename: Original client filename.

    Returns:
        Storage object name.
    """
    basename, extension = split_filename(filename)
    timestamp = time.time_ns() // 1_000_000
    suffix = ''.join(
        secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH)
    )
    return '{timestamp}_{suffix}_{basename}{extension}'.format(
        timestamp=timestamp,
        suffix=suffix,
        basename=sanitize_basename(basename),
        extension=extension,
    )
