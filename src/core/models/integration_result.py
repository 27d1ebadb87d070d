"""
IntegrationResult model representing the outcome of enriching one input row (ephemeral).
"""

from pydantic import BaseModel, model_validator

from src.core.errors import IntegrationError
from src.core.models.enriched_booking import EnrichedBooking


class IntegrationResult(BaseModel):
    """
    Outcome of integrating a single input row.

    Exactly one of ``output`` and ``error`` is set.

    Attributes:
        line_number: Line of the row in the input file (header is line 1)
        output: Enriched booking when the row was integrated
        error: Failure when it was not
    """

    line_number: int
    output: EnrichedBooking | None = None
    error: IntegrationError | None = None

    @model_validator(mode="after")
    def check_exactly_one_outcome(self):
        """Validate that a result carries either an output or an error."""
        if (self.output is None) == (self.error is None):
            raise ValueError("IntegrationResult needs exactly one of output or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    class Config:
        arbitrary_types_allowed = True
