"""Progress indicator protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IProgress(Protocol):
    """Anything that can be started and stopped, e.g. ``rich.status.Status``."""

    def start(self) -> None: ...

    def stop(self) -> None: ...
