from rest_framework import exceptions, status
from rest_framework.views import exception_handler


class InvalidInput(exceptions.ValidationError):
    default_detail = "Invalid input."


class NotFound(exceptions.NotFound):
    default_detail = "No data found."


class StoreFailure(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error."
    default_code = "store_failure"


def _flatten(detail):
    if isinstance(detail, list) and len(detail) == 1:
        return _flatten(detail[0])
    return detail


def api_exception_handler(exc, context):
    """DRF 예외 → {"ok": false, "error": ...}"""
    resp = exception_handler(exc, context)
    if resp is None:
        return None
    data = resp.data
    if isinstance(data, dict) and set(data) == {"detail"}:
        data = data["detail"]
    resp.data = {"ok": False, "error": _flatten(data)}
    return resp
