# Errors.py

from typing import Optional


class InvalidConfiguration(ValueError):
    """
    Raised when a component is constructed from values that break its invariants
    (non-positive capacity or pixel size, or an empty logical range).
    `field` names the offending option when a single one is to blame.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field: Optional[str] = field
