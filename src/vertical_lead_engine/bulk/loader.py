"""Load leads from JSON or CSV files."""

import csv
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..config.models import FieldSpec
from ..config.store import IndustryConfigStore

logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "yes", "y", "1"}
FALSE_VALUES = {"false", "no", "n", "0"}
MULTI_SEPARATOR = re.compile(r"\s*[;|]\s*")


class LeadFileError(Exception):
    """Raised when a lead file cannot be read or has an unexpected shape."""


class LeadFileLoader:
    """Read lead files, typing CSV cells with the sub-vertical's field schema.

    JSON files are expected as either:
        [{"id": "...", "age": 64, ...}, ...]
    or
        {"leads": [{...}, ...]}

    CSV headers are the lead field keys (``age``, ``monthlyRevenue`` ...).
    """

    def __init__(self, config_store: Optional[IndustryConfigStore] = None):
        self.config_store = config_store or IndustryConfigStore.default()

    def load(
        self,
        path: Union[str, Path],
        industry_id: Optional[str] = None,
        sub_vertical_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        path = Path(path)
        if not path.exists():
            raise LeadFileError(f"File not found: {path}")

        suffix = path.suffix.lower()
        if suffix == ".json":
            leads = self._load_json(path)
        elif suffix == ".csv":
            schema = self._schema(industry_id, sub_vertical_id)
            leads = self._load_csv(path, schema)
        else:
            raise LeadFileError(f"Unsupported file type '{suffix}' (expected .json or .csv)")

        logger.info(f"Loaded {len(leads)} leads from {path}")
        return leads

    def _schema(self, industry_id: Optional[str], sub_vertical_id: Optional[str]) -> Dict[str, FieldSpec]:
        if not industry_id or not sub_vertical_id:
            return {}
        return {c.key: c for c in self.config_store.columns_for(industry_id, sub_vertical_id)}

    def _load_json(self, path: Path) -> List[Dict[str, Any]]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LeadFileError(f"Error reading JSON file {path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("leads")
        if not isinstance(data, list):
            raise LeadFileError(f"{path}: expected a list of leads or an object with a 'leads' list")

        leads = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                raise LeadFileError(f"{path}: lead at index {i} is not an object")
            leads.append(item)
        return leads

    def _load_csv(self, path: Path, schema: Dict[str, FieldSpec]) -> List[Dict[str, Any]]:
        leads = []
        try:
            with open(path, 'r', encoding='utf-8-sig', newline='') as f:
                reader = csv.DictReader(f)
                for row_num, row in enumerate(reader, start=2):  # header is row 1
                    leads.append(self._parse_csv_row(row, schema, row_num))
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise LeadFileError(f"Error reading CSV file {path}: {e}") from e
        return leads

    def _parse_csv_row(self, row: Dict[str, Any], schema: Dict[str, FieldSpec], row_num: int) -> Dict[str, Any]:
        lead: Dict[str, Any] = {}
        for key, raw in row.items():
            if key is None or raw is None:
                continue
            key = key.strip()
            value = raw.strip()
            if not key or not value:
                continue
            spec = schema.get(key)
            lead[key] = coerce_value(value, spec.type if spec else "text", key, row_num)
        return lead


def coerce_value(value: str, field_type: str, key: str = "", row_num: int = 0) -> Any:
    """Convert a CSV cell to the Python type of its field.

    Cells that don't parse are kept as text with a warning; the scorers treat
    unusable values as absent.
    """
    if field_type in ("number", "currency"):
        cleaned = value.replace(",", "").replace("$", "")
        try:
            parsed = float(cleaned)
        except ValueError:
            logger.warning(f"Row {row_num}: '{key}' is not a number: {value!r}")
            return value
        return int(parsed) if parsed.is_integer() else parsed

    if field_type == "boolean":
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        logger.warning(f"Row {row_num}: '{key}' is not a yes/no value: {value!r}")
        return value

    if field_type == "multiselect":
        return [part for part in MULTI_SEPARATOR.split(value) if part]

    return value
