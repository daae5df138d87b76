import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ConflictError(APIException):
    """Business-rule violation: booking clash, occupied bed, duplicate name..."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The request conflicts with the current state."
    default_code = "conflict"


def error_message(exc) -> str:
    """Human-readable message for any exception raised by the data layer."""
    if isinstance(exc, ValidationError):
        return "Invalid input."
    if isinstance(exc, APIException):
        detail = exc.detail
        if isinstance(detail, (list, tuple)) and detail:
            return str(detail[0])
        return str(detail)
    if isinstance(exc, DjangoValidationError):
        return "; ".join(exc.messages)
    return str(exc) or exc.__class__.__name__


def _field_errors(data):
    if isinstance(data, dict):
        return {k: [str(m) for m in (v if isinstance(v, list) else [v])] for k, v in data.items()}
    if isinstance(data, list):
        return {"non_field_errors": [str(m) for m in data]}
    return {"non_field_errors": [str(data)]}


def api_exception_handler(exc, context):
    """
    Render every API error as {"message": str, "errors"?: {field: [str]}}.
    """
    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(exc.message_dict if hasattr(exc, "error_dict") else exc.messages)

    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.exception("Unhandled error in %s", context.get("view").__class__.__name__)
        return Response({"message": "Internal server error."}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        body = {"message": "Invalid input.", "errors": _field_errors(resp.data)}
    elif isinstance(exc, Http404):
        body = {"message": "Not found."}
    else:
        body = {"message": error_message(exc)}
    resp.data = body
    return resp
