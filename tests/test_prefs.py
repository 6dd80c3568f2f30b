import json

from savereminder.config import ReminderSettings
from savereminder.core.prefs import (
    PREF_PREFIX,
    JsonPreferences,
    MemoryPreferences,
    load_reminder_settings,
    save_reminder_settings,
)


def test_missing_keys_use_defaults():
    assert load_reminder_settings(MemoryPreferences()) == ReminderSettings()


def test_malformed_color_falls_back_to_red():
    prefs = MemoryPreferences({PREF_PREFIX + "TextColor": "not-a-color"})
    assert load_reminder_settings(prefs).text_color == "FF0000FF"


def test_wrong_types_and_ranges_are_tolerated():
    prefs = MemoryPreferences(
        {
            PREF_PREFIX + "Enabled": "yes",
            PREF_PREFIX + "WarningTime": -5,
            PREF_PREFIX + "FontSize": 200,
            PREF_PREFIX + "FlashSpeed": "fast",
        }
    )
    settings = load_reminder_settings(prefs)
    assert settings.enabled is True
    assert settings.warning_time_seconds == 0
    assert settings.font_size == 50
    assert settings.flash_speed == 2.0


def test_save_writes_every_key_under_prefix():
    prefs = MemoryPreferences({"Other_Enabled": False})
    save_reminder_settings(prefs, ReminderSettings())
    assert prefs.values == {
        "Other_Enabled": False,
        "SaveReminder_Enabled": True,
        "SaveReminder_WarningTime": 600,
        "SaveReminder_Flash": False,
        "SaveReminder_FlashSpeed": 2.0,
        "SaveReminder_LastFlashSpeed": 2.0,
        "SaveReminder_TextColor": "FF0000FF",
        "SaveReminder_FontSize": 20,
    }


def test_round_trip_is_idempotent():
    prefs = MemoryPreferences({PREF_PREFIX + "TextColor": "12345678", PREF_PREFIX + "FlashSpeed": 0.7})
    save_reminder_settings(prefs, load_reminder_settings(prefs))
    first = dict(prefs.values)
    save_reminder_settings(prefs, load_reminder_settings(prefs))
    assert prefs.values == first


def test_json_preferences_persist(tmp_path):
    path = tmp_path / "config" / "preferences.json"
    settings = ReminderSettings(warning_time_seconds=42, text_color="00FF00FF")
    save_reminder_settings(JsonPreferences(path), settings)

    assert json.loads(path.read_text())["SaveReminder_WarningTime"] == 42
    assert load_reminder_settings(JsonPreferences(path)) == settings


def test_json_preferences_keep_foreign_keys(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"OtherTool_Theme": "dark"}))
    save_reminder_settings(JsonPreferences(path), ReminderSettings())
    assert json.loads(path.read_text())["OtherTool_Theme"] == "dark"


def test_corrupt_json_reads_as_defaults(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("{not json")
    assert load_reminder_settings(JsonPreferences(path)) == ReminderSettings()


def test_sync_keeps_other_writers_changes(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"OtherTool_Theme": "light"}))

    ours = JsonPreferences(path)
    theirs = JsonPreferences(path)
    theirs.set_string("OtherTool_Theme", "dark")
    theirs.sync()

    ours.set_int(PREF_PREFIX + "WarningTime", 30)
    ours.sync()

    on_disk = json.loads(path.read_text())
    assert on_disk["OtherTool_Theme"] == "dark"
    assert on_disk[PREF_PREFIX + "WarningTime"] == 30
    assert ours.get_string("OtherTool_Theme", "") == "dark"


def test_reload_picks_up_external_changes(tmp_path):
    path = tmp_path / "preferences.json"
    ours = JsonPreferences(path)
    save_reminder_settings(JsonPreferences(path), ReminderSettings(font_size=33))
    assert load_reminder_settings(ours).font_size == 20
    ours.reload()
    assert load_reminder_settings(ours).font_size == 33


def test_unwritable_location_is_logged_not_raised(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    prefs = JsonPreferences(blocker / "preferences.json")
    save_reminder_settings(prefs, ReminderSettings(warning_time_seconds=7))
    assert prefs.get_int(PREF_PREFIX + "WarningTime", 0) == 7
