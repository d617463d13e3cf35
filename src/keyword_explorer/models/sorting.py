"""Sort state model for ordering keyword records."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortField(str, Enum):
    """Metrics a table can be sorted by."""

    volume = "volume"
    difficulty = "difficulty"
    cost_per_click = "cost_per_click"
    traffic_potential = "traffic_potential"


class SortDirection(str, Enum):
    ascending = "asc"
    descending = "desc"

    def toggled(self) -> SortDirection:
        if self is SortDirection.ascending:
            return SortDirection.descending
        return SortDirection.ascending


class SortState(BaseModel):
    """Current sort selection. No field means rows keep their filtered order."""

    model_config = ConfigDict(frozen=True)

    field: SortField | None = Field(default=None, description="Metric to sort by")
    direction: SortDirection = Field(default=SortDirection.descending)

    @property
    def is_active(self) -> bool:
        return self.field is not None

    def select(self, field: SortField | str) -> SortState:
        """
        Select a sort field the way a column header click does.

        Selecting the current field flips the direction; selecting a new
        field starts in descending order.
        """
        field = SortField(field)
        if field == self.field:
            return self.model_copy(update={"direction": self.direction.toggled()})
        return SortState(field=field, direction=SortDirection.descending)
