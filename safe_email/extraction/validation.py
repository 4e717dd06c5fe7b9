"""
Output contract validation for extraction results.

Checks ExtractedData.to_dict() against EXTRACTED_DATA_SCHEMA and
EmailView.to_dict() against EMAIL_VIEW_SCHEMA (jsonschema), and flags amounts reported by more than one label pass, which is allowed
but usually worth a look when tuning label sets.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Set

from jsonschema import Draft202012Validator

from safe_email.config.schemas import EMAIL_VIEW_SCHEMA, EXTRACTED_DATA_SCHEMA
from safe_email.models.extracted import ExtractedData
from safe_email.models.validation import ValidationResult

logger = logging.getLogger(__name__)

_validator = Draft202012Validator(EXTRACTED_DATA_SCHEMA["schema"])
_view_validator = Draft202012Validator(EMAIL_VIEW_SCHEMA["schema"])


def _schema_errors(validator: Draft202012Validator, payload: dict) -> List[str]:
    return [
        f"Schema violation at '{'/'.join(str(p) for p in e.absolute_path) or '<root>'}': {e.message}"
        for e in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path))
    ]


def _cross_pass_warnings(payload: dict) -> List[str]:
    kinds_by_amount: Dict[tuple, Set[str]] = defaultdict(set)
    for item in payload.get("financialData", []):
        kinds_by_amount[(item["amount"], item["currency"])].add(item["kind"])

    warnings = []
    for (amount, currency), kinds in kinds_by_amount.items():
        if len(kinds) > 1:
            warnings.append(
                f"amount {amount} {currency} matched by several passes: {sorted(kinds)}"
            )
    return warnings


def validate_extracted_data(data: ExtractedData | dict) -> ValidationResult:
    """
    Validate an extraction result against the UI contract.

    Args:
        data: ExtractedData or its to_dict() payload.

    Returns:
        ValidationResult carrying the payload dict in ``data``.
    """
    payload = data.to_dict() if isinstance(data, ExtractedData) else data

    errors = _schema_errors(_validator, payload)
    if errors:
        return ValidationResult(valid=False, errors=errors, data=payload)

    return ValidationResult(valid=True, warnings=_cross_pass_warnings(payload), data=payload)


def validate_email_view(view) -> ValidationResult:
    """
    Validate a full view payload (sanitized HTML + extracted data).

    Args:
        view: EmailView or its to_dict() payload.
    """
    payload = view if isinstance(view, dict) else view.to_dict()
    errors = _schema_errors(_view_validator, payload)
    if errors:
        return ValidationResult(valid=False, errors=errors, data=payload)
    warnings = _cross_pass_warnings(payload["extracted"])
    return ValidationResult(valid=True, warnings=warnings, data=payload)
