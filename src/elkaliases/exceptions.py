"""elkaliases Exceptions"""

import typing as t


class ElkAliasesException(Exception):  # parent exception
    """
    Base class for all exceptions raised by the tool which are not Elasticsearch
    or elastic_transport exceptions.

    For the 'errors' attribute, errors are ordered from
    most recently raised (index=0) to least recently raised (index=N)
    """

    def __init__(self, message: t.Any, errors: t.Tuple[Exception, ...] = ()):
        super().__init__(message)
        self.message = message
        self.errors = tuple(errors)

    def __repr__(self) -> str:
        parts = [repr(self.message)]
        if self.errors:
            parts.append(f"errors={self.errors!r}")
        return f'{self.__class__.__name__}({", ".join(parts)})'

    def __str__(self) -> str:
        return str(self.message)


class ClientConstructionError(ElkAliasesException):
    """
    The Elasticsearch client could not be built from the provided configuration
    """


class NotFound(ElkAliasesException):
    """
    The remote resource does not exist
    """


class RemoteRejected(ElkAliasesException):
    """
    Elasticsearch answered with a non-success status code.

    ``status`` holds the HTTP status and ``body`` the response body, unaltered.
    """

    def __init__(
        self,
        message: t.Any,
        errors: t.Tuple[Exception, ...] = (),
        status: t.Optional[int] = None,
        body: t.Any = None,
    ):
        super().__init__(message, errors=errors)
        self.status = status
        self.body = body


class ResourceMisconfig(ElkAliasesException):
    """
    The desired state of a resource failed validation
    """


class ResultNotExpected(ElkAliasesException):
    """
    The result we got is not what we expected
    """
