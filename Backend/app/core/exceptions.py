from typing import Any


class DtunesError(Exception):
    """Base exception for the dTunes library store"""


class NotFoundError(DtunesError):
    """Record not found"""
    def __init__(self, resource: str, resource_id: Any):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} with id {resource_id} not found")


class StorageError(DtunesError):
    """The database rejected a read or write"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
