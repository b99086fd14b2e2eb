from __future__ import annotations


class IngestError(Exception):
    """A beacon was rejected. Nothing from it may be stored."""


class MissingFieldError(IngestError):
    def __init__(self, field: str):
        super().__init__(f"missing {field}")
        self.field = field


class MalformedSessionError(IngestError, ValueError):
    def __init__(self, value: str):
        super().__init__(f"malformed session identifier: {value!r}")
        self.value = value


class UnknownBeaconKindError(IngestError, ValueError):
    def __init__(self, kind: str):
        super().__init__(f"unknown beacon kind: {kind!r}")
        self.kind = kind


class InvalidProjectError(IngestError, ValueError):
    def __init__(self, project_id: int):
        super().__init__(f"project id out of signed 64-bit range: {project_id}")
        self.project_id = project_id
