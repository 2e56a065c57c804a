"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from qna.domain.error import FieldError, ValidationError


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    @classmethod
    def build(cls, **data: Any) -> Self:
        """Construct an entity, reporting every invalid field at once.

        ``None`` values are treated as absent so that they surface as
        missing required fields.

        Raises:
            ValidationError: With one FieldError per failing field
        """
        fields = {key: value for key, value in data.items() if value is not None}
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            errors = [
                FieldError(
                    path=".".join(str(part) for part in error["loc"]) or cls.__name__,
                    message=error["msg"],
                    error_code=error["type"],
                )
                for error in e.errors()
            ]
            raise ValidationError(errors, f"{cls.__name__} validation failed") from e
