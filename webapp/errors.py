"""
Authentication Errors

Exceptions raised by the auth service and turned into plain-text responses.
"""


class AuthError(Exception):
    """Base error; carries the HTTP status and the text sent to the client."""

    status_code = 400
    message = "Bad request."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    status_code = 400
    message = "Email and password are required."


class DuplicateUserError(AuthError):
    status_code = 400
    message = "User already exists."


class AuthenticationError(AuthError):
    status_code = 401
    message = "Invalid email or password."
