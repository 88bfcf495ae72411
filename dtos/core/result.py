"""
AttributeResult - Outcome of a quiet attribute read or write.
"""

from dataclasses import dataclass
from typing import Any, Optional

from dtos.errors import DtoError


@dataclass(frozen=True)
class AttributeResult:
    """
    Success or failure of Dto.try_set() / Dto.try_get().

    Attributes:
        name: Attribute name the call was made with
        value: Stored or read value (None on failure)
        error: The DtoError that would have been raised, if any
    """
    name: Any
    value: Any = None
    error: Optional[DtoError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the value, or raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value
