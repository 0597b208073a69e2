"""
Log rows — the events recorded against a batch

One immutable Pydantic model per log category. Numeric fields are lenient
(None and numeric strings are accepted, nothing is range-checked): the
calculation layer, not the model, decides how invalid numbers are treated.
Strict checks for entries being written live in flockcalc.core.contracts.

Some columns exist under two names in the remote tables (mortality
`count`/`quantity`, sale `total_revenue`/`total_amount`); the models
accept either and expose a single accessor.
"""

import datetime as dt
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator

from flockcalc.core.math.numerical_safeguards import to_finite
from flockcalc.exceptions import UnknownLogCategory

DateValue = str | dt.datetime | dt.date | None


# =============================================================================
# ENUMS
# =============================================================================


class LogCategory(str, Enum):
    """Log tables that can be fetched for a batch"""

    FEED = "feed"
    WEIGHT = "weight"
    MORTALITY = "mortality"
    WATER = "water"
    VACCINATION = "vaccination"
    EXPENSE = "expense"
    SALE = "sale"

    @classmethod
    def parse(cls, value: "str | LogCategory") -> "LogCategory":
        """
        Resolve a category name.

        Raises:
            UnknownLogCategory: if value is not a known category
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownLogCategory(str(value)) from None


class ExpenseCategory(str, Enum):
    """Expense categories with their Spanish labels"""

    CHICKS = "chicks"
    FEED = "feed"
    MEDICINE = "medicine"
    LABOR = "labor"
    UTILITIES = "utilities"
    OTHER = "other"

    @property
    def label(self) -> str:
        return EXPENSE_CATEGORY_LABELS[self]


EXPENSE_CATEGORY_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.CHICKS: "Pollitos",
    ExpenseCategory.FEED: "Alimento",
    ExpenseCategory.MEDICINE: "Medicina",
    ExpenseCategory.LABOR: "Mano de Obra",
    ExpenseCategory.UTILITIES: "Servicios",
    ExpenseCategory.OTHER: "Otros",
}


# =============================================================================
# BASE ROW
# =============================================================================


class LogRow(BaseModel):
    """Fields shared by every log table"""

    id: str | int | None = Field(default=None, description="Row identifier")
    batch_id: str | int | None = Field(default=None, description="Owning batch")
    date: DateValue = Field(default=None, description="Day the event happened")
    created_at: DateValue = Field(default=None, description="Row creation time")
    notes: str | None = Field(default=None, description="Free text")

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}


# =============================================================================
# CATEGORY ROWS
# =============================================================================


class FeedLog(LogRow):
    """Feed delivered to the house"""

    quantity_kg: float | None = Field(
        default=None,
        validation_alias=AliasChoices("quantity_kg", "feed_kg"),
        description="Feed mass (kg)",
    )
    feed_type: str | None = Field(default=None, description="Feed product")
    cost: float | None = Field(default=None, description="Cost of this delivery")


class WeightLog(LogRow):
    """Sampled average live weight"""

    avg_weight_kg: float | None = Field(default=None, description="Average bird weight (kg)")
    sample_size: int | None = Field(default=None, description="Birds weighed")


class MortalityLog(LogRow):
    """Dead birds found"""

    count: float | None = Field(
        default=None,
        validation_alias=AliasChoices("count", "quantity", "dead_quantity"),
        description="Dead birds",
    )
    cause: str | None = Field(default=None, description="Cause, if known")


class WaterLog(LogRow):
    """Water consumption"""

    liters: float | None = Field(default=None, description="Water consumed (l)")


class VaccinationLog(LogRow):
    """Vaccine application"""

    vaccine_name: str | None = Field(default=None, description="Vaccine")
    dosage: str | None = Field(default=None, description="Dosage as entered")


class ExpenseLog(LogRow):
    """Money spent on the batch"""

    amount: float | None = Field(default=None, description="Amount spent")
    category: ExpenseCategory = Field(
        default=ExpenseCategory.OTHER, description="Expense category"
    )
    description: str | None = Field(default=None, description="What was bought")

    @field_validator("category", mode="before")
    @classmethod
    def unknown_category_is_other(cls, v: object) -> object:
        """Missing or unrecognised categories are booked as 'other'."""
        if v is None or v == "":
            return ExpenseCategory.OTHER
        if isinstance(v, ExpenseCategory):
            return v
        try:
            return ExpenseCategory(v)
        except ValueError:
            return ExpenseCategory.OTHER


class SaleLog(LogRow):
    """Birds sold"""

    total_revenue: float | None = Field(default=None, description="Sale revenue")
    total_amount: float | None = Field(default=None, description="Legacy revenue column")
    quantity_birds: float | None = Field(default=None, description="Birds sold")
    quantity: float | None = Field(default=None, description="Legacy birds-sold column")
    total_weight_kg: float | None = Field(default=None, description="Live weight sold (kg)")
    price_per_kg: float | None = Field(default=None, description="Price per kg")
    buyer: str | None = Field(default=None, description="Buyer")

    @property
    def revenue(self) -> float:
        """total_revenue, falling back to total_amount when zero or missing."""
        return to_finite(self.total_revenue) or to_finite(self.total_amount)

    @property
    def birds_sold(self) -> float:
        """quantity_birds, falling back to quantity when zero or missing."""
        return to_finite(self.quantity_birds) or to_finite(self.quantity)


LOG_MODELS: dict[LogCategory, type[LogRow]] = {
    LogCategory.FEED: FeedLog,
    LogCategory.WEIGHT: WeightLog,
    LogCategory.MORTALITY: MortalityLog,
    LogCategory.WATER: WaterLog,
    LogCategory.VACCINATION: VaccinationLog,
    LogCategory.EXPENSE: ExpenseLog,
    LogCategory.SALE: SaleLog,
}
