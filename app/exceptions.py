"""
Domain exceptions raised by the service layer.

server.py registers a handler that turns any ActionError into an
ActionErrorResponse with the matching HTTP status.
"""


class ActionError(Exception):
    """Base class for failures reported back to the caller."""
    code = 'INTERNAL_SERVER_ERROR'
    status_code = 500
    default_message = 'Something went wrong.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ActionError):
    """No authenticated user on the request."""
    code = 'UNAUTHORIZED'
    status_code = 401
    default_message = 'You must be signed in to perform this action.'


class NotFound(ActionError):
    """Job does not exist or belongs to another user."""
    code = 'NOT_FOUND'
    status_code = 404
    default_message = 'TTS job not found.'


class BadRequest(ActionError):
    """Request is well-formed but has nothing to do."""
    code = 'BAD_REQUEST'
    status_code = 400
    default_message = 'Provide at least one field to update.'
