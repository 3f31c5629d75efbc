"""
Presenter interface for user-facing output.

Keeps the wizard and the core components independent of how messages are
styled and where they are written.
"""

from abc import ABC, abstractmethod

from .progress import IProgress


class IPresenter(ABC):
    """Interface for output presentation to the operator."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a plain message."""

    @abstractmethod
    def print_dim(self, message: str) -> None:
        """Print a low-importance message (status lines, echoed commands)."""

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""

    @abstractmethod
    def print_success(self, message: str) -> None:
        """Print a success message."""

    @abstractmethod
    def print_tip(self, message: str) -> None:
        """Print a hint prefixed with 'Tip:'."""

    @abstractmethod
    def print_banner(self, title: str) -> None:
        """Print a prominent header."""

    @abstractmethod
    def spinner(self, message: str) -> IProgress:
        """
        Create a progress indicator.

        The indicator is not started; the command runner starts and stops it
        around the external process.

        Args:
            message: Text shown next to the spinner
        """
