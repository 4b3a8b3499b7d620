"""
Application-wide constants.

This module centralizes the magic strings and numbers used by the API,
the ORM model and the DTOs so they stay in sync.
"""


class EmployeeLimits:
    """Column sizes for the employees table"""

    NAME_MAX_LENGTH = 50
    SALARY_PRECISION = 9
    SALARY_SCALE = 2


class ServiceInfo:
    """Service metadata reported by the API"""

    NAME = "Employee Directory API"
    DESCRIPTION = "CRUD API for employee records and their managers"
    VERSION = "1.0.0"


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500
