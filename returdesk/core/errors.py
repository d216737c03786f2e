# -*- coding: utf-8 -*-


class ReturnError(Exception):
    """Base class for every recoverable outcome of a return operation."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class NotFound(ReturnError):
    status_code = 404


class InvalidArgument(ReturnError):
    status_code = 400


class EmptyUndo(ReturnError):
    status_code = 400


class StorageFailure(ReturnError):
    status_code = 500
