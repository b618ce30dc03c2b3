"""
Base DTO shared by the entity DTOs.
"""

from typing import Any, Dict, Mapping, Optional, TypeVar
from pydantic import BaseModel, ConfigDict

D = TypeVar("D", bound="BaseDTO")


class BaseDTO(BaseModel):
    """
    Frozen pydantic model whose ``model_fields_set`` records which fields
    were supplied. That set is what separates "absent" from "null".
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: Optional[int] = None

    @classmethod
    def from_dict(cls: type[D], data: Mapping[str, Any]) -> D:
        """
        Build a DTO from a request payload.

        Both snake_case and camelCase keys are accepted for the same field;
        the snake_case key wins when both are present. Numeric fields are
        coerced to their numeric type.

        Args:
            data: Mapping of field names to values

        Returns:
            DTO with only the supplied fields marked as present
        """
        return cls.model_validate(dict(data))

    def to_dict(self) -> Dict[str, Any]:
        """
        Present fields keyed by their storage column names.

        ``id`` is never included; it identifies the row, it is not written.
        """
        return self.model_dump(exclude_unset=True, exclude={"id"})

    def has(self, field: str) -> bool:
        return field in self.model_fields_set

    def merge(self: D, other: D) -> D:
        """
        Combine two DTOs into a new one.

        Every field present in ``other`` overrides the same field of ``self``;
        fields absent from ``other`` fall back to ``self``. ``id`` resolves
        self-first.

        Args:
            other: DTO whose present fields take priority

        Returns:
            A new DTO of the same type
        """
        data = self.model_dump(exclude_unset=True)
        data.update(other.model_dump(exclude_unset=True, exclude={"id"}))
        if self.id is not None:
            data["id"] = self.id
        elif other.has("id"):
            data["id"] = other.id
        return type(self).model_validate(data)
