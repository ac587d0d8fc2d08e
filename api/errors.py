"""
Error types raised while handling a request.

Every error is terminal for the request that raised it: the application
error handler turns it into a rendered error page with the matching status.
"""


class FrontendError(Exception):
    """Base class for errors that end a request with an error page"""
    code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ClientInputError(FrontendError):
    """Bad, missing or oversized request parameters"""
    code = 400


class NotFoundError(FrontendError):
    """Unknown route or unresolved artist identifier"""
    code = 404


class MethodError(FrontendError):
    """Request method other than GET"""
    code = 405


class UpstreamError(FrontendError):
    """Remote fetch or decode failure"""
    code = 500


class RenderError(FrontendError):
    """Template execution failure"""
    code = 500
