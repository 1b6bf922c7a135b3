from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, ValidationError, field_validator
from typing import Optional
from shortlink_app.services.alias_strategies import RESERVED_ALIASES


ALIAS_PATTERN = r"^[A-Za-z0-9_-]+$"
ALIAS_MAX_LENGTH = 64

_http_url = TypeAdapter(HttpUrl)


class SaveURLRequest(BaseModel):
    url: str = Field(..., description="The original URL to be shortened")
    alias: Optional[str] = Field(
        None,
        max_length=ALIAS_MAX_LENGTH,
        pattern=ALIAS_PATTERN,
        description="Custom alias; generated when omitted",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Check the URL is a valid http(s) URL, but keep it verbatim"""
        try:
            _http_url.validate_python(value)
        except ValidationError:
            raise ValueError("invalid url")
        return value

    @field_validator("alias", mode="before")
    @classmethod
    def empty_alias_is_none(cls, value):
        if value == "":
            return None
        return value

    @field_validator("alias")
    @classmethod
    def alias_not_reserved(cls, value: Optional[str]) -> Optional[str]:
        if value in RESERVED_ALIASES:
            raise ValueError(f"alias '{value}' is reserved")
        return value


class SaveURLResponse(BaseModel):
    id: int
    alias: str
    url: str
    short_url: str
