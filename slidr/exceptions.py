"""
Domain errors raised by the stores and services, and the FastAPI handlers
that turn them into HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class SlidrError(Exception):
    """Base class for every error the API reports to its callers."""

    message = "Unexpected error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateEmail(SlidrError):
    message = "This email is already in use."


class InvalidCredentials(SlidrError):
    message = "Invalid credentials."


class UserNotFound(SlidrError):
    message = "User not found"


class ProjectNotFound(SlidrError):
    message = "Project not found"


class UserHasProjects(SlidrError):
    message = "User still owns projects and cannot be deleted."


def duplicate_email_handler(request: Request, exc: DuplicateEmail):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


def invalid_credentials_handler(request: Request, exc: InvalidCredentials):
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"error": exc.message})


def user_not_found_handler(request: Request, exc: UserNotFound):
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


def project_not_found_handler(request: Request, exc: ProjectNotFound):
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


def user_has_projects_handler(request: Request, exc: UserHasProjects):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": exc.message})


def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DuplicateEmail, duplicate_email_handler)
    app.add_exception_handler(InvalidCredentials, invalid_credentials_handler)
    app.add_exception_handler(UserNotFound, user_not_found_handler)
    app.add_exception_handler(ProjectNotFound, project_not_found_handler)
    app.add_exception_handler(UserHasProjects, user_has_projects_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
