class APIFailureException(Exception):
    """Raised when the violations collection cannot be reached or
    answers with a non-2xx status."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class FetchFailureException(APIFailureException):
    pass


class MutationFailureException(APIFailureException):
    pass
