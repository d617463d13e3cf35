"""Keyword record model for imported keyword research data."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from keyword_explorer.utils.text_utils import count_words, parse_float, parse_int, parse_volume


class KeywordRecord(BaseModel):
    """One row of a keyword research export."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "keyword": "best seo tool",
                "intent": "C,T",
                "volume": "12,100",
                "difficulty": 42,
                "cost_per_click": 3.25,
                "traffic_potential": 18000,
                "parent_keyword": "seo tools",
            }
        },
    )

    keyword: str = Field(default="", description="The keyword phrase")
    intent: str = Field(default="", description="Search intent codes, e.g. 'I,C'")
    volume: str = Field(default="", description="Monthly search volume as displayed, e.g. '12,100'")
    difficulty: int = Field(default=0, description="Keyword difficulty percentage")
    cost_per_click: float = Field(default=0.0, description="Cost per click in USD")
    traffic_potential: int = Field(default=0, description="Estimated traffic potential")
    parent_keyword: str = Field(default="", description="Parent topic keyword")

    @field_validator("keyword", "intent", "volume", "parent_keyword", mode="before")
    @classmethod
    def convert_none_to_empty(cls, v):
        """Convert missing text values to empty strings."""
        return "" if v is None else str(v)

    @field_validator("difficulty", "traffic_potential", mode="before")
    @classmethod
    def convert_int(cls, v):
        """Parse integer columns, defaulting to 0."""
        return parse_int(v, default=0)

    @field_validator("cost_per_click", mode="before")
    @classmethod
    def convert_float(cls, v):
        """Parse float columns, defaulting to 0.0."""
        return parse_float(v, default=0.0)

    @computed_field
    @property
    def volume_value(self) -> int:
        """Search volume parsed from its display string."""
        return parse_volume(self.volume)

    @computed_field
    @property
    def word_count(self) -> int:
        """Number of words in the keyword."""
        return count_words(self.keyword)

    def metric(self, name: str) -> int | float:
        """Numeric value of a filterable or sortable metric."""
        if name == "volume":
            return self.volume_value
        if name == "word_count":
            return self.word_count
        return getattr(self, name)
