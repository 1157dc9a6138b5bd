"""Errors raised while obtaining the system_profiler payload."""


class SystemProfilerError(Exception):
    """Base class for failures of a single collection attempt."""


class CommandFailedError(SystemProfilerError):
    """system_profiler could not run or exited with a non-zero status."""

    def __init__(self, status: int | None, message: str) -> None:
        self.status = status
        self.message = message
        if status is None:
            super().__init__(f"system_profiler failed: {message}")
        else:
            super().__init__(f"system_profiler exited with {status}: {message}")


class MalformedPayloadError(SystemProfilerError):
    """The payload was not a JSON object."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Failed to decode system_profiler JSON payload.")
