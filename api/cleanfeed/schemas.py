from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator


class FilterSettings(BaseModel):
    """
    Settings supplied by the external settings store.
    - enabled: when False every item is passed through unfiltered
    - filter_mode / strictness: opaque to the classifier, echoed to the
      presentation layer so it can decide how to render filtered items
    - whitelist: identifiers that are never filtered
    - keywords: extra phrases added to the built-in keyword set
    """

    enabled: bool = True
    filter_mode: Literal["blur", "remove"] = "blur"
    strictness: Literal["relaxed", "moderate", "strict"] = "moderate"
    whitelist: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)


class ScanIn(BaseModel):
    """
    One observed content item.
    - identifier: account handle, used as the cache key when present
    - text: post text and bio, concatenated by the caller
    """

    identifier: Optional[str] = None
    text: Optional[str] = None


class TextIn(BaseModel):
    text: Optional[str] = None


class IdentifierIn(BaseModel):
    identifier: Optional[str] = None


class VerdictOut(BaseModel):
    should_filter: bool
    reason: Optional[str] = None
    confidence: float


class ScanOut(BaseModel):
    """
    Output of the content filter.
    source: which step produced the verdict
    filter_mode / strictness: copied from current settings
    """

    identifier: Optional[str] = None
    should_filter: bool
    reason: Optional[str] = None
    confidence: float
    source: Literal["disabled", "whitelist", "cache", "identifier", "text"]
    filter_mode: Literal["blur", "remove"]
    strictness: Literal["relaxed", "moderate", "strict"]


class KeywordIn(BaseModel):
    keyword: str

    @field_validator("keyword")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("keyword must not be blank")
        return v


class KeywordsOut(BaseModel):
    keywords: List[str]
    count: int


class CacheStatsOut(BaseModel):
    size: int
    filtered: int


class FilterStatsOut(BaseModel):
    filtered_today: int
    cached_users: int
    last_reset: str
