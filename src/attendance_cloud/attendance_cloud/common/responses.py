from __future__ import annotations

from flask import jsonify

from ..core.enums import ErrorCode
from ..core.exceptions import DomainError


def error_response(code: ErrorCode, message: str):
    """Error envelope of the callable protocol, with the matching HTTP status."""
    body = {"error": {"status": code.canonical_name, "message": message}}
    return jsonify(body), code.http_status


def domain_error_response(err: DomainError):
    return error_response(err.code, err.message)
