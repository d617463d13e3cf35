"""Result snapshot models produced by the pipeline."""

from pydantic import BaseModel, ConfigDict, Field

from keyword_explorer.models.keyword import KeywordRecord


class KeywordStats(BaseModel):
    """Rollup statistics over the filtered keywords."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(default=0, description="Number of filtered keywords")
    total_volume: int = Field(default=0, description="Sum of search volume")
    average_difficulty: int = Field(default=0, description="Mean difficulty, rounded half up")


class PipelineResult(BaseModel):
    """Immutable snapshot of one pipeline run."""

    model_config = ConfigDict(frozen=True)

    visible: tuple[KeywordRecord, ...] = Field(default=())
    stats: KeywordStats = Field(default_factory=KeywordStats)
