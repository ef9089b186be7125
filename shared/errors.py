"""Error taxonomy for the data processor.

Every error raised while handling a request derives from IngestionError so the
handler can collapse them into a single 500 response at its outer boundary.
"""


class IngestionError(Exception):
    """Base class for failures while processing one request."""


class InputError(IngestionError):
    """The request body is missing, not JSON, or lacks a string fileContent."""


class DependencyError(IngestionError):
    """A call to the storage table or the metrics sink failed."""

    def __init__(self, dependency: str, message: str):
        super().__init__(f"{dependency}: {message}")
        self.dependency = dependency
