"""User-friendly messages for storage failures.

Belongs to the Application layer — translates StorageOperationError reasons
into sentences suitable for the CLI.
"""

from __future__ import annotations

from addressbook.domain.errors import StorageFailure, StorageOperationError

_REASON_MESSAGES: dict[StorageFailure, str] = {
    StorageFailure.INVALID_PATH: "Storage file '{path}' is not acceptable; it should end with '.txt'.",
    StorageFailure.PARSE_ERROR: "Storage file '{path}' is not in the expected format.",
    StorageFailure.MISSING_DATA: "Storage file '{path}' is missing some required data.",
    StorageFailure.ILLEGAL_VALUE: "Storage file '{path}' contains illegal data values.",
    StorageFailure.READ_ERROR: "Could not read storage file '{path}'.",
    StorageFailure.WRITE_ERROR: "Could not write storage file '{path}'.",
}


def storage_error_message(exc: StorageOperationError) -> str:
    """Return a user-facing message for *exc*.

    Args:
        exc: The storage failure to describe.

    Returns:
        A sentence naming the path and, when known, the offending field.
    """
    message = _REASON_MESSAGES[exc.reason].format(path=exc.path)
    if exc.field:
        cause = exc.__cause__
        detail = f": {cause}" if cause is not None else ""
        message += f" (field '{exc.field}'{detail})"
    return message
