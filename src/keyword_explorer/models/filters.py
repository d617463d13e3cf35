"""Filter state models for narrowing keyword records."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from keyword_explorer.utils.text_utils import parse_float, parse_int


class Intent(str, Enum):
    """Search intent codes used in keyword exports."""

    INFORMATIONAL = "I"
    TRANSACTIONAL = "T"
    COMMERCIAL = "C"
    NAVIGATIONAL = "N"


class RangeDimension(str, Enum):
    """Numeric metrics that can be range filtered."""

    volume = "volume"
    difficulty = "difficulty"
    cost_per_click = "cost_per_click"
    word_count = "word_count"
    traffic_potential = "traffic_potential"


class TextMatchMode(str, Enum):
    """How multiple text terms are combined."""

    all = "all"
    any = "any"


class NumericRange(BaseModel):
    """Inclusive numeric range. A missing bound is unbounded."""

    model_config = ConfigDict(frozen=True)

    min: int | float | None = Field(default=None, description="Lower bound (inclusive)")
    max: int | float | None = Field(default=None, description="Upper bound (inclusive)")

    @property
    def is_active(self) -> bool:
        return self.min is not None or self.max is not None

    def contains(self, value: int | float) -> bool:
        """Check whether value lies within the range."""
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True

    @classmethod
    def from_inputs(
        cls,
        min_text: str | None = None,
        max_text: str | None = None,
        numeric: Callable[..., int | float | None] = int,
    ) -> NumericRange:
        """
        Build a range from user-entered bound text.

        Blank or unparsable bounds are treated as absent rather than zero.

        Args:
            min_text: Lower bound as typed
            max_text: Upper bound as typed
            numeric: ``int`` or ``float``, selects how bounds are parsed

        Returns:
            NumericRange with parsed bounds
        """
        parser = parse_float if numeric is float else parse_int

        def parse_bound(text: str | None) -> int | float | None:
            if text is None or not str(text).strip():
                return None
            return parser(text, default=None)

        return cls(min=parse_bound(min_text), max=parse_bound(max_text))


class TextFilter(BaseModel):
    """Ordered list of terms matched against the keyword text."""

    model_config = ConfigDict(frozen=True)

    mode: TextMatchMode = Field(default=TextMatchMode.all, description="ALL or ANY term must match")
    terms: tuple[str, ...] = Field(default=(), description="Terms, trimmed on entry")

    @property
    def is_active(self) -> bool:
        return bool(self.terms)

    def with_term(self, text: str) -> TextFilter:
        """Append a term. Blank input is ignored."""
        term = text.strip()
        if not term:
            return self
        return self.model_copy(update={"terms": self.terms + (term,)})

    def without_term(self, index: int) -> TextFilter:
        """Remove the term at index. Out-of-range indexes are ignored."""
        if not 0 <= index < len(self.terms):
            return self
        terms = self.terms[:index] + self.terms[index + 1:]
        return self.model_copy(update={"terms": terms})

    def with_mode(self, mode: TextMatchMode) -> TextFilter:
        return self.model_copy(update={"mode": TextMatchMode(mode)})


class FilterState(BaseModel):
    """All active filter criteria. The default instance lets every record through."""

    model_config = ConfigDict(frozen=True)

    volume: NumericRange = Field(default_factory=NumericRange)
    difficulty: NumericRange = Field(default_factory=NumericRange)
    cost_per_click: NumericRange = Field(default_factory=NumericRange)
    word_count: NumericRange = Field(default_factory=NumericRange)
    traffic_potential: NumericRange = Field(default_factory=NumericRange)
    selected_intents: frozenset[Intent] = Field(default_factory=frozenset)
    include: TextFilter = Field(default_factory=TextFilter)
    exclude: TextFilter = Field(default_factory=TextFilter)

    def range_for(self, dimension: RangeDimension | str) -> NumericRange:
        return getattr(self, RangeDimension(dimension).value)

    def with_range(self, dimension: RangeDimension | str, value: NumericRange) -> FilterState:
        """Replace one numeric range."""
        return self.model_copy(update={RangeDimension(dimension).value: value})

    def toggle_intent(self, intent: Intent | str) -> FilterState:
        """Select an intent, or deselect it if already selected."""
        intent = Intent(intent)
        return self.model_copy(update={"selected_intents": self.selected_intents ^ {intent}})

    def add_include_term(self, text: str) -> FilterState:
        return self.model_copy(update={"include": self.include.with_term(text)})

    def remove_include_term(self, index: int) -> FilterState:
        return self.model_copy(update={"include": self.include.without_term(index)})

    def with_include_mode(self, mode: TextMatchMode | str) -> FilterState:
        return self.model_copy(update={"include": self.include.with_mode(mode)})

    def add_exclude_term(self, text: str) -> FilterState:
        return self.model_copy(update={"exclude": self.exclude.with_term(text)})

    def remove_exclude_term(self, index: int) -> FilterState:
        return self.model_copy(update={"exclude": self.exclude.without_term(index)})

    def with_exclude_mode(self, mode: TextMatchMode | str) -> FilterState:
        return self.model_copy(update={"exclude": self.exclude.with_mode(mode)})

    @property
    def has_active_filters(self) -> bool:
        return (
            any(self.range_for(dim).is_active for dim in RangeDimension)
            or bool(self.selected_intents)
            or self.include.is_active
            or self.exclude.is_active
        )
