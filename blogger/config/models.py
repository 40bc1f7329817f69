from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from blogger.domain.entities import SORTABLE_POST_FIELDS

SortOrder = Literal["asc", "desc"]
PostFormType = Literal["blogger_post", "blogger_signed_post"]


class PaginationConfig(BaseModel):
    max_per_page: int = Field(default=10, ge=1, le=500)


class SortingConfig(BaseModel):
    sortable_fields: list[str] = Field(
        default_factory=lambda: ["created_at", "updated_at", "title", "published"]
    )
    default_field: str = "created_at"
    default_order: SortOrder = "desc"

    @field_validator("sortable_fields")
    @classmethod
    def _fields_are_post_columns(cls, fields: list[str]) -> list[str]:
        unknown = sorted(set(fields) - SORTABLE_POST_FIELDS)
        if unknown:
            raise ValueError(f"posts cannot be sorted by: {', '.join(unknown)}")
        return fields

    @model_validator(mode="after")
    def _default_is_sortable(self) -> "SortingConfig":
        if self.default_field not in self.sortable_fields:
            raise ValueError(
                f"default_field '{self.default_field}' is not one of sortable_fields"
            )
        return self


class FormsConfig(BaseModel):
    post_form: PostFormType = "blogger_post"


class AuthorConfig(BaseModel):
    default: str = "admin"
    header: str = "X-Remote-User"


class BloggerConfig(BaseModel):
    engine: str = "html"
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    forms: FormsConfig = Field(default_factory=FormsConfig)
    author: AuthorConfig = Field(default_factory=AuthorConfig)
