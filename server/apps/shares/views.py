"""JSON views for the upload handshake and share links.

Request and response bodies use camelCase keys. Failures are returned
as ``{"error": <code>, "detail": <message>}``.
"""

import json
import logging
from http import HTTPStatus
from typing import Any, Final

from django.core.exceptions import SuspiciousOperation, ValidationError
from django.http import (
    HttpRequest,
    HttpResponse,
    HttpResponseRedirect,
    JsonResponse,
)
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from server.apps.shares.exceptions import (
    ConfigurationError,
    ConflictError,
    LinkNotFoundError,
    NotFoundInStorageError,
    PayloadTooLargeError,
    ShareError,
)
from server.apps.shares.logic.link_operations import get_stats, resolve_link
from server.apps.shares.logic.upload_operations import (
    finalize_upload,
    request_upload,
)

logger = logging.getLogger(__name__)

_ERROR_STATUSES: Final[dict[type[ShareError], tuple[str, HTTPStatus]]] = {
    ConfigurationError: ('configuration_error', HTTPStatus.SERVICE_UNAVAILABLE),
    NotFoundInStorageError: ('not_found_in_storage', HTTPStatus.NOT_FOUND),
    PayloadTooLargeError: (
        'payload_too_large',
        HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    ),
    ConflictError: ('conflict', HTTPStatus.CONFLICT),
    LinkNotFoundError: ('not_found', HTTPStatus.NOT_FOUND),
}


def _error_response(
    code: str,
    detail: str,
    status: HTTPStatus,
) -> JsonResponse:
    return JsonResponse({'error': code, 'detail': detail}, status=status)


def _share_error_response(error: ShareError) -> JsonResponse:
    code, status = _ERROR_STATUSES[type(error)]
    logger.info('Request failed with %s: %s', code, error)
    return _error_response(code, str(error), status)


def _read_json(request: HttpRequest) -> dict[str, Any]:
    """Parse a JSON object from the request body.

    Raises:
        ValidationError: If the body is not a JSON object.
    """
    try:
        payload = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise ValidationError('Request body must be valid JSON') from error
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')
    return payload


def _string_field(payload: dict[str, Any], field_name: str) -> str:
    field_value = payload.get(field_name, '')
    if not isinstance(field_value, str):
        raise ValidationError(f'{field_name} must be a string')
    return field_value


@csrf_exempt
@require_POST
def request_upload_view(request: HttpRequest) -> JsonResponse:
    """Issue a slug, object name and direct upload URL."""
    try:
        payload = _read_json(request)
        ticket = request_upload(
            _string_field(payload, 'filename'),
            _string_field(payload, 'contentType'),
        )
    except ValidationError as error:
        return _error_response(
            'validation_error',
            ' '.join(error.messages),
            HTTPStatus.BAD_REQUEST,
        )
    except ShareError as error:
        return _share_error_response(error)

    return JsonResponse({
        'slug': ticket.slug,
        'objectName': ticket.object_name,
        'uploadUrl': ticket.upload_url,
        'maxBytes': ticket.max_bytes,
    })


@csrf_exempt
@require_POST
def finalize_upload_view(request: HttpRequest) -> JsonResponse:
    """Commit an uploaded object and return its share link."""
    try:
        payload = _read_json(request)
        finalized = finalize_upload(
            _string_field(payload, 'slug'),
            _string_field(payload, 'objectName'),
        )
    except ValidationError as error:
        return _error_response(
            'validation_error',
            ' '.join(error.messages),
            HTTPStatus.BAD_REQUEST,
        )
    except SuspiciousOperation as error:
        # Object names escaping the bucket location
        return _error_response(
            'validation_error',
            str(error),
            HTTPStatus.BAD_REQUEST,
        )
    except ShareError as error:
        return _share_error_response(error)

    return JsonResponse({
        'linkPath': finalized.link_path,
        'sizeBytes': finalized.size_bytes,
        'contentType': finalized.content_type,
    })


@require_GET
def get_file_view(request: HttpRequest, slug: str) -> JsonResponse:
    """Return the read URL and content type for a slug."""
    try:
        resolved = resolve_link(slug)
    except LinkNotFoundError as error:
        return _share_error_response(error)

    return JsonResponse({
        'url': resolved.url,
        'contentType': resolved.content_type,
    })


@require_GET
def get_file_stats_view(request: HttpRequest) -> JsonResponse:
    """Return the number of committed files."""
    stats = get_stats()
    return JsonResponse({'totalFiles': stats.total_files})


@require_GET
def share_link_view(request: HttpRequest, slug: str) -> HttpResponse:
    """Redirect a public '/f/<slug>' link to the stored object."""
    try:
        resolved = resolve_link(slug)
    except LinkNotFoundError as error:
        return _share_error_response(error)
    return HttpResponseRedirect(resolved.url)


@require_GET
def health_check_view(request: HttpRequest) -> JsonResponse:
    """Report that the service is up."""
    return JsonResponse({
        'status': 'ok',
        'timestamp': timezone.now().isoformat(),
    })
