"""
Application-wide settings: a key-value store with defaults.

``SettingsStore`` loads every value once and writes through on each setter.
"""
import copy
import logging

from .models import AppSetting

logger = logging.getLogger(__name__)

CURRENCIES = ("USD", "UGX")

DEFAULT_THEME_COLORS = {
    "background": "0 0% 94.1%",
    "foreground": "210 10% 23%",
    "primary": "210 50% 60%",
    "accent": "180 33% 59%",
}

DEFAULTS = {
    "logo_width": 125,
    "logo_data_url": "",
    "theme_colors": DEFAULT_THEME_COLORS,
    "currency": "USD",
    "default_appointment_duration": 30,
    "clinic_open_time": "09:00",
    "clinic_close_time": "17:00",
    "patient_portal_enabled": True,
    "reminder_lead_time": 24,
}


def get_setting(key: str):
    if key not in DEFAULTS:
        raise KeyError(key)
    row = AppSetting.objects.filter(key=key).first()
    if row is None:
        return copy.deepcopy(DEFAULTS[key])
    return row.value


def all_settings() -> dict:
    stored = {row.key: row.value for row in AppSetting.objects.filter(key__in=DEFAULTS.keys())}
    return {key: stored[key] if key in stored else copy.deepcopy(default) for key, default in DEFAULTS.items()}


def set_setting(key: str, value):
    if key not in DEFAULTS:
        raise KeyError(key)
    AppSetting.objects.update_or_create(key=key, defaults={"value": value})
    return value


class SettingsStore:
    """
    Settings loaded once for the lifetime of the object; every setter persists.
    """

    def __init__(self):
        self._values = all_settings()
        self._listeners = []

    def __getitem__(self, key):
        return self._values[key]

    def as_dict(self) -> dict:
        return copy.deepcopy(self._values)

    def subscribe(self, callback):
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback) if callback in self._listeners else None

    def set(self, key, value):
        self._values[key] = set_setting(key, value)
        for callback in list(self._listeners):
            callback(key, value)

    def update(self, values: dict):
        for key, value in values.items():
            self.set(key, value)

    def set_theme_color(self, name: str, hsl: str):
        colors = dict(self._values["theme_colors"])
        colors[name] = hsl
        self.set("theme_colors", colors)

    def reset_theme(self):
        self.set("theme_colors", copy.deepcopy(DEFAULT_THEME_COLORS))
        logger.info("Theme colours reset to defaults")
