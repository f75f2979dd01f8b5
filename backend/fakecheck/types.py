from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Literal


Platform = Literal["facebook", "instagram", "twitter"]
Impact = Literal["high", "medium", "low", "positive"]


class _CamelModel(BaseModel):
    # JSON uses camelCase keys, python code uses snake_case attributes
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PictureClassification(_CamelModel):
    is_human: bool = False
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    stock_photo: bool = False
    error: Optional[str] = None


class ProfileSnapshot(_CamelModel):
    platform: Platform
    username: str = ""
    has_profile_picture: bool = False
    profile_picture_url: Optional[str] = None
    has_bio: bool = False
    post_count: Optional[int] = Field(default=None, ge=0)
    followers: Optional[float] = Field(default=None, ge=0)
    following: Optional[float] = Field(default=None, ge=0)
    follow_ratio: Optional[float] = Field(default=None, ge=0)
    join_date: Optional[str] = None
    post_captions: Optional[List[str]] = Field(default=None, max_length=5)
    has_external_links: bool = False
    # platform extras
    friend_count: Optional[int] = Field(default=None, ge=0)        # facebook
    has_comments: Optional[bool] = None                             # facebook
    has_tagged_content: Optional[bool] = None                       # instagram
    profile_picture_analysis: Optional[PictureClassification] = None

    @model_validator(mode="after")
    def _derive_follow_ratio(self):
        # a ratio only exists alongside both counts
        if self.followers is None or self.following is None:
            self.follow_ratio = None
        elif self.follow_ratio is None:
            self.follow_ratio = follow_ratio(self.followers, self.following)
        return self


class Indicator(_CamelModel):
    factor: str
    issue: str
    impact: Impact


class AnalysisResult(_CamelModel):
    url: str
    platform: Platform
    analysis_data: ProfileSnapshot
    score: int = Field(ge=0, le=100)
    indicators: List[Indicator] = []
    is_fake: bool
    confidence: float = Field(ge=0)


class AnalyzeRequest(BaseModel):
    url: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    message: str


def follow_ratio(followers: Optional[float], following: Optional[float]) -> Optional[float]:
    """following/followers, 0 when there are no followers, None unless both are known."""
    if followers is None or following is None:
        return None
    if followers == 0:
        return 0.0
    return following / followers
