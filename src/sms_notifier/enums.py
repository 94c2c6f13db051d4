from enum import StrEnum


class BuildStatus(StrEnum):
    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"


class ValidationKind(StrEnum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"
