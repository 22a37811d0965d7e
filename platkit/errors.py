# platkit Errors
# Exceptions raised for caller bugs (never for expected "no value" results)

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from platkit.triple.model import Triple


class PreconditionError(RuntimeError):
    """Raised when a classification is asked of a triple it does not apply to."""

    def __init__(self, message: str, triple: Optional["Triple"] = None):
        self.message = message
        self.triple = triple
        if triple is not None:
            message = f"{message}: {triple}"
        super().__init__(message)
