"""Stage result types.

Every stage returns either ``Ok`` carrying its output or ``Err`` carrying a
``StageError``. The orchestrator inspects the result and stops on the first
``Err``.
"""

from enum import Enum


class ErrorKind(Enum):
    FETCH = 'FetchError'
    CANCEL = 'CancelError'
    CONFIG_LOOKUP = 'ConfigLookupError'
    CONFIG_DELETE = 'ConfigDeleteError'
    CONFIG_CREATE = 'ConfigCreateError'
    BUILD_TRIGGER = 'BuildTriggerError'
    UNEXPECTED = 'UnexpectedError'


# Human readable prefix for each error kind
ERROR_MESSAGES = {
    ErrorKind.FETCH: 'Error getting the current build status of the branch.',
    ErrorKind.CANCEL: 'Error finishing the current build.',
    ErrorKind.CONFIG_LOOKUP: 'Error getting the current settings of the branch.',
    ErrorKind.CONFIG_DELETE: 'Error deleting the current build settings of the branch.',
    ErrorKind.CONFIG_CREATE: 'Error setting the build configuration.',
    ErrorKind.BUILD_TRIGGER: 'Error starting build.',
    ErrorKind.UNEXPECTED: 'The flow has failed.',
}


class StageError:
    """A failure raised by one stage of the reset flow."""
    
    def __init__(self, kind, stage, status=None, body=None, detail=None):
        """Initialize a StageError.
        
        Args:
            kind (ErrorKind): Error category
            stage (str): Name of the stage that failed
            status (int, optional): Remote HTTP status code
            body (optional): Remote response payload
            detail (str, optional): Extra context, e.g. an exception message
        """
        self.kind = kind
        self.stage = stage
        self.status = status
        self.body = body
        self.detail = detail
    
    @classmethod
    def from_response(cls, kind, stage, response):
        """Build an error from a non-success APIResponse."""
        return cls(kind, stage, status=response.status_code, body=response.body_text())
    
    @property
    def message(self):
        """Failure message surfaced to the caller."""
        parts = [f"❌ {ERROR_MESSAGES[self.kind]}", f"[{self.stage}]"]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.body:
            parts.append(f"body={self.body}")
        if self.detail:
            parts.append(self.detail)
        return ' '.join(parts)
    
    def __repr__(self):
        return f"StageError(kind={self.kind.value}, stage={self.stage}, status={self.status})"


class Ok:
    is_ok = True
    
    def __init__(self, value=None):
        self.value = value
    
    def __repr__(self):
        return f"Ok({self.value!r})"


class Err:
    is_ok = False
    
    def __init__(self, error):
        self.error = error
    
    def __repr__(self):
        return f"Err({self.error!r})"
