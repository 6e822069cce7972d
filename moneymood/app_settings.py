"""User-facing application settings, stored under ``moneymood-settings``."""
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from typing import Any, Dict, Optional

from moneymood.currency.models import HOME_CURRENCY, SUPPORTED_CURRENCIES
from moneymood.utils.logging import get_logger


logger = get_logger(__name__)

THEMES = ("light", "dark", "auto")
LANGUAGES = ("ja", "en")


@dataclass
class NotificationSettings:
    budget_alerts: bool = True
    weekly_reports: bool = False
    push_notifications: bool = False
    email_notifications: bool = False


@dataclass
class PrivacySettings:
    data_retention_days: int = 365
    auto_backup: bool = True
    analytics_enabled: bool = False
    crash_reporting: bool = True


@dataclass
class AppSettings:
    default_currency: str = HOME_CURRENCY
    theme: str = "auto"  # light | dark | auto
    language: str = "ja"  # ja | en
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    privacy: PrivacySettings = field(default_factory=PrivacySettings)
    version: str = "1.0.0"
    last_modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "defaultCurrency": self.default_currency,
            "theme": self.theme,
            "language": self.language,
            "notifications": _camel_dict(self.notifications),
            "privacy": _camel_dict(self.privacy),
            "version": self.version,
        }
        if self.last_modified is not None:
            data["lastModified"] = self.last_modified.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AppSettings":
        """Merge stored settings over the defaults.

        Unknown keys are ignored and invalid values fall back to defaults.
        """
        defaults = cls()
        if not isinstance(data, dict):
            logger.warning("Invalid settings format, using defaults")
            return defaults

        currency = data.get("defaultCurrency", defaults.default_currency)
        theme = data.get("theme", defaults.theme)
        language = data.get("language", defaults.language)
        last_modified = data.get("lastModified")

        return cls(
            default_currency=currency if currency in SUPPORTED_CURRENCIES else defaults.default_currency,
            theme=theme if theme in THEMES else defaults.theme,
            language=language if language in LANGUAGES else defaults.language,
            notifications=_merge(defaults.notifications, data.get("notifications")),
            privacy=_merge(defaults.privacy, data.get("privacy")),
            version=str(data.get("version", defaults.version)),
            last_modified=_parse_timestamp(last_modified),
        )


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        logger.warning(f"Invalid lastModified in settings: {value}")
        return None


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _camel_dict(section) -> Dict[str, Any]:
    return {_camel(f.name): getattr(section, f.name) for f in fields(section)}


def _merge(section, data: Any):
    if not isinstance(data, dict):
        return section
    updates = {}
    for f in fields(section):
        key = _camel(f.name)
        if key in data and isinstance(data[key], type(getattr(section, f.name))):
            updates[f.name] = data[key]
    return replace(section, **updates)
