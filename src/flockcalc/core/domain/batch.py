"""
Batch — a flock raised together from a start date to an end date

Immutable Pydantic model for a row of the batches table. Only the fields
the calculations read are modelled; extra columns are ignored.
"""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, Field

from flockcalc.core.math.numerical_safeguards import to_finite


# =============================================================================
# ENUMS
# =============================================================================


class BatchStatus(str, Enum):
    """Lifecycle state of a batch"""

    ACTIVE = "active"
    COMPLETED = "completed"


# =============================================================================
# BATCH MODEL
# =============================================================================


class Batch(BaseModel):
    """
    A production batch.

    Dates are kept as received (calendar-only string, datetime or date);
    flockcalc.display.dates resolves them to local calendar dates.
    """

    id: str | int = Field(..., description="Batch identifier")
    name: str = Field(default="", description="Display name (e.g. 'Lote 12')")
    initial_quantity: float | None = Field(
        default=None, description="Birds placed at batch start"
    )
    start_date: str | dt.datetime | dt.date | None = Field(
        default=None, description="Placement date"
    )
    end_date: str | dt.datetime | dt.date | None = Field(
        default=None, description="Closing date, None while the batch is active"
    )
    status: BatchStatus = Field(default=BatchStatus.ACTIVE, description="active/completed")
    created_at: str | dt.datetime | None = Field(default=None, description="Row creation time")

    model_config = {"frozen": True, "extra": "ignore"}

    @property
    def is_active(self) -> bool:
        return self.status is BatchStatus.ACTIVE

    @property
    def placed_birds(self) -> float:
        """Initial quantity as a finite, non-negative number."""
        return max(0.0, to_finite(self.initial_quantity))
