"""Export / import bundles: ``{expenses, settings, exportDate, version}``."""
import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from moneymood.app_settings import AppSettings
from moneymood.expenses.models import ExpenseRecord
from moneymood.utils.errors import MoneyMoodError, ValidationError
from moneymood.utils.logging import get_logger


logger = get_logger(__name__)

EXPORT_VERSION = "1.0"


@dataclass
class ImportResult:
    """Outcome of reading a bundle. Bad records are skipped, not fatal."""

    expenses: List[ExpenseRecord] = field(default_factory=list)
    settings: AppSettings = field(default_factory=AppSettings)
    imported_expenses: int = 0
    skipped_expenses: int = 0
    errors: List[str] = field(default_factory=list)
    export_date: Optional[datetime] = None
    version: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.skipped_expenses == 0


def build_export_bundle(
    expenses: Iterable[ExpenseRecord],
    settings: Optional[AppSettings] = None,
    now: Optional[datetime] = None,
    version: str = EXPORT_VERSION,
) -> Dict[str, Any]:
    settings = settings or AppSettings()
    return {
        "expenses": [expense.to_dict() for expense in expenses],
        "settings": settings.to_dict(),
        "exportDate": (now or datetime.now(timezone.utc)).isoformat(),
        "version": version,
    }


def parse_export_bundle(data: Any) -> ImportResult:
    """
    Read a bundle produced by ``build_export_bundle`` (or the web app).

    Raises:
        ValidationError: If the payload is not a bundle object
    """
    if not isinstance(data, dict):
        raise ValidationError("Export bundle must be a JSON object")

    raw_expenses = data.get("expenses", [])
    if not isinstance(raw_expenses, list):
        raise ValidationError("Export bundle 'expenses' must be a list")

    result = ImportResult(
        settings=AppSettings.from_dict(data.get("settings")),
        version=data.get("version"),
    )

    export_date = data.get("exportDate")
    if isinstance(export_date, str):
        try:
            result.export_date = datetime.fromisoformat(export_date.replace("Z", "+00:00"))
        except ValueError:
            result.errors.append(f"Invalid exportDate: {export_date}")

    seen = set()
    for index, raw in enumerate(raw_expenses):
        try:
            record = ExpenseRecord.from_dict(raw)
        except MoneyMoodError as e:
            result.skipped_expenses += 1
            result.errors.append(f"expenses[{index}]: {e}")
            continue
        if record.id in seen:
            result.skipped_expenses += 1
            result.errors.append(f"expenses[{index}]: duplicate id {record.id}")
            continue
        seen.add(record.id)
        result.expenses.append(record)

    result.imported_expenses = len(result.expenses)
    if result.skipped_expenses:
        logger.warning(
            f"Imported {result.imported_expenses} expenses, skipped {result.skipped_expenses}"
        )
    return result


def save_bundle(
    path: Union[str, Path],
    expenses: Iterable[ExpenseRecord],
    settings: Optional[AppSettings] = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    bundle = build_export_bundle(expenses, settings)
    path.write_text(json.dumps(bundle, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info(f"Wrote {len(bundle['expenses'])} expenses to {path}")
    return path


def load_bundle(path: Union[str, Path]) -> ImportResult:
    """Load a bundle file; a missing file is an empty bundle."""
    path = Path(path)
    if not path.exists():
        return ImportResult()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e
    return parse_export_bundle(data)
