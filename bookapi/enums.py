from enum import Enum


class ErrorKind(str, Enum):
    invalid_input = "invalid_input"
    not_found = "not_found"
    storage_failure = "storage_failure"
