"""
Contract Validation Module

JSON Schema validation of log entries before they are written.
"""

from .validators import (
    ContractValidator,
    ExpenseLogValidator,
    FeedLogValidator,
    MortalityLogValidator,
    SaleLogValidator,
    SchemaLoader,
    VaccinationLogValidator,
    WaterLogValidator,
    WeightLogValidator,
    get_log_validator,
    validate_log_entry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FeedLogValidator",
    "WeightLogValidator",
    "MortalityLogValidator",
    "WaterLogValidator",
    "VaccinationLogValidator",
    "ExpenseLogValidator",
    "SaleLogValidator",
    # Functions
    "get_log_validator",
    "validate_log_entry",
]
