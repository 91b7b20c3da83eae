# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for geometric value types.

    Vectors, lines and circles are plain values:
    - Immutability: instances are frozen (and therefore hashable) after creation
    - Copyability: modified copies are made via with_changes(), which re-runs validation
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New validated instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        unknown = [key for key in changes if key not in type(self).model_fields]
        if unknown:
            raise ValueError(f"Invalid field: {unknown[0]}")

        # Shallow field map keeps nested models as model instances
        current_data = {name: getattr(self, name) for name in type(self).model_fields}
        current_data.update(changes)

        return cast(T, type(self).model_validate(current_data))
