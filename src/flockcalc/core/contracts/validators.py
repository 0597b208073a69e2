"""
JSON Schema Contract Validators

Validation of log entries before the app writes them to the remote tables.
The calculation layer tolerates bad numbers after the fact; these contracts
stop them at the door: required fields, calendar-only dates, positive
quantities, known expense categories.

Schemas (shipped in schema/ next to this module):
- feed_log.json
- weight_log.json
- mortality_log.json
- water_log.json
- vaccination_log.json
- expense_log.json
- sale_log.json
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from flockcalc.core.domain.logs import LogCategory


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for the JSON Schema files.

    Schemas are read from the package's schema/ directory and cached.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'feed_log')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Shared loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps a Draft 2020-12 validator for one schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Iterate over every validation error found in data."""
        return self.validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> list[str]:
        """
        Human readable errors, one per problem, keyed by field path.

        Returns:
            e.g. ["quantity_kg: -5 is less than or equal to the minimum of 0"];
            empty when the data is valid
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(e.path)):
            location = ".".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{location}: {error.message}")
        return messages


class FeedLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("feed_log")


class WeightLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("weight_log")


class MortalityLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("mortality_log")


class WaterLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("water_log")


class VaccinationLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("vaccination_log")


class ExpenseLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("expense_log")


class SaleLogValidator(ContractValidator):
    def __init__(self):
        super().__init__("sale_log")


_VALIDATORS: Dict[LogCategory, type[ContractValidator]] = {
    LogCategory.FEED: FeedLogValidator,
    LogCategory.WEIGHT: WeightLogValidator,
    LogCategory.MORTALITY: MortalityLogValidator,
    LogCategory.WATER: WaterLogValidator,
    LogCategory.VACCINATION: VaccinationLogValidator,
    LogCategory.EXPENSE: ExpenseLogValidator,
    LogCategory.SALE: SaleLogValidator,
}


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def get_log_validator(category: "str | LogCategory") -> ContractValidator:
    """
    Validator for a log category.

    Raises:
        UnknownLogCategory: If the category does not exist
    """
    return _VALIDATORS[LogCategory.parse(category)]()


def validate_log_entry(category: "str | LogCategory", data: Dict[str, Any]) -> None:
    """
    Validate a log entry payload before it is written.

    Args:
        category: Log category ('feed', 'weight', ...)
        data: Entry payload

    Raises:
        UnknownLogCategory: If the category does not exist
        ValidationError: If the payload does not match the schema
    """
    get_log_validator(category).validate(data)
