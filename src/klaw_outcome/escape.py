"""Escape signal used to leave an AsyncOutcome producer early."""

from typing import Any


class Escape(Exception):  # noqa: N818
    """Raised inside a producer to stop it with a typed failure.

    Raised by ``Helpers.throw_failure`` and by the lifting helpers when they
    meet a Failure. Only ``AsyncOutcome.run`` catches it; it never escapes
    a run.
    """

    __slots__ = ('_error',)

    def __init__(self, error: Any) -> None:
        """Initialize Escape with the failure payload.

        Args:
            error: The value the run should fail with.
        """
        self._error = error
        super().__init__(f'Escape({error!r})')

    @property
    def error(self) -> Any:
        """The failure payload carried by this escape."""
        return self._error


def failure_payload(exc: Exception) -> Any:
    """Return the failure payload an exception folds into.

    An Escape folds into the error it carries; any other exception is
    itself the payload.
    """
    if isinstance(exc, Escape):
        return exc.error
    return exc
