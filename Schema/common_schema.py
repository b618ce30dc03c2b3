from typing import Any, Generic, Iterable, List, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class DeleteRequest(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str


class DataResponse(BaseModel, Generic[T]):
    message: Optional[str] = None
    data: T


class ListResponse(BaseModel, Generic[T]):
    data: List[T]


def reject_explicit_nulls(model: BaseModel, nullable: Iterable[str] = ()) -> None:
    """Fields that may be omitted on update may still not be sent as null."""
    allowed = set(nullable)
    for name in model.model_fields_set:
        if name not in allowed and getattr(model, name) is None:
            raise ValueError(f"The {name.replace('_', ' ')} field must not be null.")


def present_fields(model: BaseModel, exclude: Iterable[str] = ()) -> dict[str, Any]:
    """Only the fields the client actually sent."""
    return model.model_dump(exclude_unset=True, exclude=set(exclude))
