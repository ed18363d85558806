"""Unit tests for key-based settings access."""

import pytest

from awtrixctl.exceptions import InvalidSettingValueError, UnknownSettingError
from awtrixctl.models import Color, Settings
from awtrixctl.settings_keys import (
    SETTING_KEYS,
    format_settings,
    get_setting,
    list_settings,
    parse_setting,
    set_setting,
)


class TestGetSetting:
    """Test reading settings by key."""

    @pytest.mark.unit
    def test_top_level_values(self, settings_sample):
        assert get_setting(settings_sample, "brightness") == "120"
        assert get_setting(settings_sample, "auto_brightness") == "false"
        assert get_setting(settings_sample, "text_color") == "#FFFFFF"
        assert get_setting(settings_sample, "transition") == "Slide"

    @pytest.mark.unit
    def test_nested_values(self, settings_sample):
        assert get_setting(settings_sample, "time_app.format") == "1"
        assert get_setting(settings_sample, "time_app.show_weekday") == "true"

    @pytest.mark.unit
    def test_absent_values(self, settings_sample):
        assert get_setting(settings_sample, "scroll_speed") is None
        assert get_setting(settings_sample, "date_app.format") is None
        assert get_setting(Settings(), "time_app.format") is None

    @pytest.mark.unit
    def test_unknown_key(self, settings_sample):
        with pytest.raises(UnknownSettingError) as exc_info:
            get_setting(settings_sample, "bogus")
        assert exc_info.value.key == "bogus"


class TestSetSetting:
    """Test writing settings by key."""

    @pytest.mark.unit
    def test_set_then_get(self):
        settings = set_setting(Settings(), "time_app.format", "2")
        assert get_setting(settings, "time_app.format") == "2"

    @pytest.mark.unit
    def test_nested_set_materializes_only_that_field(self):
        settings = set_setting(Settings(), "time_app.format", "2")
        assert settings.to_payload() == {"timeApp": {"format": 2}}

    @pytest.mark.unit
    def test_nested_set_keeps_sibling_fields(self, settings_sample):
        settings = set_setting(settings_sample, "time_app.format", "3")
        assert settings.time_app.format == 3
        assert settings.time_app.show_weekday is True

    @pytest.mark.unit
    def test_input_is_not_mutated(self, settings_sample):
        set_setting(settings_sample, "brightness", "10")
        set_setting(settings_sample, "time_app.format", "4")
        assert settings_sample.brightness == 120
        assert settings_sample.time_app.format == 1

    @pytest.mark.unit
    def test_parsed_types(self):
        settings = Settings()
        settings = set_setting(settings, "brightness", "255")
        settings = set_setting(settings, "auto_transition", "TRUE")
        settings = set_setting(settings, "text_color", "255,0,0")
        settings = set_setting(settings, "date_app.format", "%d.%m.%y")
        assert settings.brightness == 255
        assert settings.auto_transition is True
        assert settings.text_color == Color(r=255, g=0, b=0)
        assert settings.date_app.format == "%d.%m.%y"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "key, value",
        [
            ("time_app.format", "9"),
            ("brightness", "256"),
            ("brightness", "-1"),
            ("app_time", "ten"),
            ("auto_brightness", "yes"),
            ("text_color", "chartreuse"),
            ("time_app.cal_body_color", "1,2"),
        ],
    )
    def test_invalid_values(self, key, value):
        with pytest.raises(InvalidSettingValueError) as exc_info:
            set_setting(Settings(), key, value)
        assert exc_info.value.key == key

    @pytest.mark.unit
    def test_unknown_key_checked_before_value(self):
        with pytest.raises(UnknownSettingError):
            set_setting(Settings(), "bogus", "not even valid")

    @pytest.mark.unit
    def test_parse_setting_validates_without_settings(self):
        assert parse_setting("scroll_speed", "80") == 80
        with pytest.raises(InvalidSettingValueError):
            parse_setting("scroll_speed", "fast")


class TestListing:
    """Test key listing and formatting."""

    @pytest.mark.unit
    def test_every_key_listed_once(self):
        keys = [entry.key for entry in list_settings()]
        assert keys == list(SETTING_KEYS)
        assert len(keys) == len(set(keys)) == 16
        assert all(entry.description for entry in list_settings())

    @pytest.mark.unit
    def test_format_settings_skips_absent(self, settings_sample):
        pairs = dict(format_settings(settings_sample))
        assert pairs["brightness"] == "120"
        assert pairs["time_app.format"] == "1"
        assert "scroll_speed" not in pairs
        assert format_settings(Settings()) == []
