"""Local validation for bulk food uploads."""

import json

INVALID_JSON_MESSAGE = "Invalid JSON format. Please check syntax."
NOT_AN_ARRAY_MESSAGE = "Input must be a JSON Array"
EMPTY_INPUT_MESSAGE = "Paste a JSON Array of food items."

SAMPLE_BULK_PAYLOAD = """[
  {
    "name": "Apple",
    "calories": 52,
    "protein": 0.3,
    "carbs": 14,
    "fat": 0.2,
    "category": "Fruits",
    "emoji": "\U0001f34e",
    "servingSize": "1 medium"
  }
]"""


class BulkUploadError(Exception):
    """Raised when pasted bulk data is rejected before any request is made."""


def parse_bulk_foods(raw: str) -> list[object]:
    """Parse pasted text into the array sent to the bulk endpoint."""
    if not raw.strip():
        raise BulkUploadError(EMPTY_INPUT_MESSAGE)
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise BulkUploadError(INVALID_JSON_MESSAGE) from exc
    if not isinstance(data, list):
        raise BulkUploadError(NOT_AN_ARRAY_MESSAGE)
    return data
