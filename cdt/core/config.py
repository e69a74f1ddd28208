import json
from cdt.common.logger import log
from cdt.common.setup import PATHS


#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.settings

THEME_NAMES = ("Light", "Dark")

# Default values for every known setting, along with the type each one must have to be accepted from disk.
_SETTINGS_DEFAULTS = {
    "theme": "Light",
    "font": "Segoe UI",
    "always_on_top": False,
}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

# True if the given value is acceptable for the given settings key.
def _is_valid(key, value):
    default = _SETTINGS_DEFAULTS[key]
    # bool is a subclass of int, so check it explicitly both ways
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(default, bool) and isinstance(value, bool)
    if not isinstance(value, type(default)):
        return False
    if key == "theme":
        return value in THEME_NAMES
    return True

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from SETTINGS_PATH, filling in defaults for anything missing or invalid. If the file doesn't exist
# yet, a fresh default file is written so users have something to edit.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            settings = build_default_settings()
            save_settings(settings)
            log.info(f"No existing settings found at '{SETTINGS_PATH}', wrote fresh defaults.")
            return settings

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            settings = json.load(f)
        if not isinstance(settings, dict):
            raise TypeError(f"Expected a JSON object in settings file, got {type(settings).__name__}")

        defaulted_values = set()
        for key, default in _SETTINGS_DEFAULTS.items():
            if key not in settings or not _is_valid(key, settings[key]):
                defaulted_values.add(key)
                settings[key] = default

        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to defaults in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.",exc_info=True)
        return build_default_settings()

# Write the given settings to disk at SETTINGS_PATH.
def save_settings(settings):
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
