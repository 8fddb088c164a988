from typing import Annotated, Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")


class CmsModel(BaseModel):
    """Schema for a record returned by the CMS; accepts camelCase aliases or field names."""

    model_config = ConfigDict(populate_by_name=True)


class CmsResponse(BaseModel, Generic[T]):
    """The ``{data, meta}`` envelope every CMS content endpoint returns."""

    data: T
    meta: Dict[str, Any] = Field(default_factory=dict)


class ViewModel(BaseModel):
    """Render-ready page data. Instances are immutable."""

    model_config = ConfigDict(frozen=True)


def none_to_list(value: Any) -> Any:
    """The CMS sends ``null`` for empty relations; treat it as an empty list."""
    return [] if value is None else value


NullableList = Annotated[List[T], BeforeValidator(none_to_list)]
