"""Smoke tests for CLI commands.

Commands run through Click's CliRunner against a mocked requests session, so
the full path from option parsing to the HTTP request is exercised without a
device.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests
from click.testing import CliRunner

from awtrixctl import __version__
from awtrixctl.cli.context import load_wire_file
from awtrixctl.cli.main import cli
from awtrixctl.exceptions import SerializationError
from awtrixctl.models import AppConfig, Settings

DEVICE_HOST = "192.168.1.100"
BASE = f"http://{DEVICE_HOST}"


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def session(config_path, make_response):
    """Patch session creation so every client talks to a mock."""
    mock = MagicMock(spec=requests.Session)
    mock.request.return_value = make_response()
    with patch("awtrixctl.client.device.create_session", return_value=mock):
        yield mock


@pytest.fixture
def device_responder(make_response):
    """Build a side effect answering /version, /api/stats and /api/settings like a device."""

    def factory(settings_payload=None):
        bodies = {
            "/version": {"text": "0.96"},
            "/api/stats": {
                "body": {"uptime": 7200, "wifi_signal": -60, "ram": 1000, "matrix": True}
            },
            "/api/settings": {"body": settings_payload or {}},
        }

        def respond(method, url, **kwargs):
            for path, body in bodies.items():
                if url.endswith(path):
                    return make_response(200, url=url, **body)
            return make_response(url=url)

        return respond

    return factory


def invoke(runner, *args, **kwargs):
    return runner.invoke(cli, ["-d", DEVICE_HOST, *args], **kwargs)


def requests_sent(session):
    return [(c.args[0], c.args[1], c.kwargs.get("json")) for c in session.request.call_args_list]


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "AWTRIX3" in result.output
        assert "--device" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    @pytest.mark.parametrize(
        "group",
        ["power", "notify", "app", "custom", "display", "indicator", "sound", "info",
         "system", "settings", "device"],
    )
    def test_group_help(self, runner, config_path, group):
        result = runner.invoke(cli, [group, "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestNotifyCommand:
    """Test the notify command."""

    def test_sends_builder_payload(self, runner, session):
        result = invoke(
            runner, "notify", "Hello", "--color", "red", "--icon", "1234", "--progress", "150"
        )
        assert result.exit_code == 0, result.output
        assert requests_sent(session) == [
            ("POST", f"{BASE}/api/notify",
             {"text": "Hello", "icon": 1234, "color": [255, 0, 0], "progress": 100}),
        ]
        assert "Notification sent" in result.output

    def test_flags_and_effect(self, runner, session):
        result = invoke(runner, "notify", "x", "--hold", "--no-scroll", "--effect", "Fireworks")
        assert result.exit_code == 0, result.output
        assert requests_sent(session)[0][2] == {
            "text": "x", "hold": True, "noScroll": True, "effect": "Fireworks"
        }

    def test_bad_color_rejected_before_request(self, runner, session):
        result = invoke(runner, "notify", "Hello", "--color", "256,0,0")
        assert result.exit_code == 1
        assert "Error: Invalid color format" in result.output
        session.request.assert_not_called()

    def test_unknown_color_name(self, runner, session):
        result = invoke(runner, "notify", "Hello", "--color", "chartreuse")
        assert result.exit_code == 1
        assert "Error: Unknown color: 'chartreuse'" in result.output
        session.request.assert_not_called()

    def test_requires_text(self, runner, session):
        result = invoke(runner, "notify")
        assert result.exit_code == 2
        session.request.assert_not_called()

    def test_missing_file_names_path(self, runner, session, tmp_path: Path):
        missing = tmp_path / "nope.json"
        result = invoke(runner, "notify", "--file", str(missing))
        assert result.exit_code == 2
        assert "nope.json" in result.output
        session.request.assert_not_called()

    def test_from_file(self, runner, session, tmp_path: Path):
        path = tmp_path / "alert.json"
        path.write_text('{"text": "From file", "color": "#00FF00", "hold": true}')
        result = invoke(runner, "notify", "--file", str(path))
        assert result.exit_code == 0, result.output
        assert requests_sent(session)[0][2] == {
            "text": "From file", "color": [0, 255, 0], "hold": True
        }

    def test_file_progress_is_clamped(self, runner, session, tmp_path: Path):
        path = tmp_path / "build.json"
        path.write_text('{"text": "Build", "progress": 250.0}')
        result = invoke(runner, "notify", "--file", str(path))
        assert result.exit_code == 0, result.output
        assert requests_sent(session)[0][2] == {"text": "Build", "progress": 100}

    def test_malformed_file_names_path(self, runner, session, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text('{"text": ')
        result = invoke(runner, "notify", "--file", str(path))
        assert result.exit_code == 1
        assert f"Error: Could not decode Notification from {path}" in result.output
        session.request.assert_not_called()

    def test_dismiss(self, runner, session):
        result = invoke(runner, "notify", "--dismiss")
        assert result.exit_code == 0
        assert requests_sent(session) == [("POST", f"{BASE}/api/notify/dismiss", None)]

    def test_json_output(self, runner, session):
        result = invoke(runner, "--json", "notify", "Hi")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"text": "Hi"}


@pytest.mark.integration
class TestDeviceErrors:
    """Test error display and exit codes."""

    def test_api_error(self, runner, session, make_response):
        session.request.return_value = make_response(400, text="bad request")
        result = invoke(runner, "app", "next")
        assert result.exit_code == 1
        assert "Error: API error: bad request (code: 400)" in result.output

    def test_transport_error_has_hint(self, runner, session):
        session.request.side_effect = requests.ConnectionError("refused")
        result = invoke(runner, "info", "version")
        assert result.exit_code == 1
        assert f"Error: Could not reach device at {BASE}/version" in result.output
        assert "Suggestion:" in result.output

    def test_no_device(self, runner, session):
        result = runner.invoke(cli, ["power", "on"])
        assert result.exit_code == 1
        assert "No device specified" in result.output
        session.request.assert_not_called()


@pytest.mark.integration
class TestDisplayCommands:
    """Test power, indicator and mood light commands."""

    def test_power(self, runner, session):
        result = invoke(runner, "power", "OFF")
        assert result.exit_code == 0
        assert requests_sent(session) == [("POST", f"{BASE}/api/power", {"power": False})]

    def test_indicator_all(self, runner, session):
        result = invoke(runner, "indicator", "all", "--color", "#FF0000")
        assert result.exit_code == 0, result.output
        assert [url for _, url, _ in requests_sent(session)] == [
            f"{BASE}/api/indicator1", f"{BASE}/api/indicator2", f"{BASE}/api/indicator3"
        ]

    def test_indicator_off(self, runner, session):
        result = invoke(runner, "indicator", "2", "--off")
        assert result.exit_code == 0
        assert requests_sent(session) == [("POST", f"{BASE}/api/indicator2", {})]

    def test_indicator_needs_color_or_off(self, runner, session):
        result = invoke(runner, "indicator", "1")
        assert result.exit_code == 2
        session.request.assert_not_called()

    def test_mood_kelvin_range(self, runner, session):
        result = invoke(runner, "display", "mood", "--kelvin", "9000")
        assert result.exit_code == 1
        assert "2000K" in result.output
        session.request.assert_not_called()

    def test_custom_create(self, runner, session):
        result = invoke(runner, "custom", "create", "weather", "--text", "21C", "--icon", "7")
        assert result.exit_code == 0, result.output
        assert requests_sent(session) == [
            ("POST", f"{BASE}/api/custom?name=weather", {"text": "21C", "icon": 7})
        ]

    def test_custom_create_needs_content(self, runner, session):
        result = invoke(runner, "custom", "create", "weather")
        assert result.exit_code == 2
        assert "--file" in result.output
        session.request.assert_not_called()

    def test_custom_create_file_progress_is_clamped(self, runner, session, tmp_path: Path):
        path = tmp_path / "weather.json"
        path.write_text('{"text": "21C", "progress": "150"}')
        result = invoke(runner, "custom", "create", "weather", "--file", str(path))
        assert result.exit_code == 0, result.output
        assert requests_sent(session)[0][2] == {"text": "21C", "progress": 100}


@pytest.mark.integration
class TestSettingsCommands:
    """Test settings get/set/import/export."""

    def test_set_nested_key(self, runner, session, make_response, settings_payload):
        session.request.side_effect = [make_response(200, settings_payload), make_response()]
        result = invoke(runner, "settings", "set", "time_app.format", "2")
        assert result.exit_code == 0, result.output
        method, url, payload = requests_sent(session)[1]
        assert (method, url) == ("POST", f"{BASE}/api/settings")
        assert payload["timeApp"] == {"format": 2, "showWeekday": True}
        assert payload["brightness"] == 120

    def test_set_invalid_value_before_request(self, runner, session):
        result = invoke(runner, "settings", "set", "time_app.format", "9")
        assert result.exit_code == 1
        assert "Error: Invalid value for 'time_app.format'" in result.output
        session.request.assert_not_called()

    def test_unknown_key_before_request(self, runner, session):
        result = invoke(runner, "settings", "get", "bogus")
        assert result.exit_code == 1
        assert "Unknown setting key: bogus" in result.output
        assert "settings list" in result.output
        session.request.assert_not_called()

    def test_get_key(self, runner, session, make_response, settings_payload):
        session.request.return_value = make_response(200, settings_payload)
        result = invoke(runner, "settings", "get", "text_color")
        assert result.exit_code == 0
        assert "text_color: #FFFFFF" in result.output

    def test_get_all_json(self, runner, session, make_response, settings_payload):
        session.request.return_value = make_response(200, settings_payload)
        result = invoke(runner, "-j", "settings", "get")
        assert result.exit_code == 0
        assert json.loads(result.output) == settings_payload

    def test_export_and_import(self, runner, session, make_response, settings_payload, tmp_path: Path):
        session.request.return_value = make_response(200, settings_payload)
        out = tmp_path / "backup.json"
        result = invoke(runner, "settings", "export", "-o", str(out))
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text()) == settings_payload

        session.request.reset_mock()
        session.request.return_value = make_response()
        result = invoke(runner, "settings", "import", str(out))
        assert result.exit_code == 0, result.output
        assert requests_sent(session) == [("POST", f"{BASE}/api/settings", settings_payload)]

    def test_import_invalid_file(self, runner, session, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text('{"brightness": 999}')
        result = invoke(runner, "settings", "import", str(path))
        assert result.exit_code == 1
        assert f"Error: Could not decode Settings from {path}: brightness" in result.output
        session.request.assert_not_called()

    def test_import_bad_color_is_serialization_error(self, runner, session, tmp_path: Path):
        path = tmp_path / "bad_color.json"
        path.write_text('{"textColor": "#GGGGGG"}')
        with pytest.raises(SerializationError) as exc_info:
            load_wire_file(path, Settings)
        assert exc_info.value.source == str(path)
        assert "textColor" in exc_info.value.user_message

        result = invoke(runner, "settings", "import", str(path))
        assert result.exit_code == 1
        assert f"Error: Could not decode Settings from {path}" in result.output
        assert "Suggestion" not in result.output
        session.request.assert_not_called()

    def test_list(self, runner, config_path):
        result = runner.invoke(cli, ["settings", "list"])
        assert result.exit_code == 0
        assert "time_app.format" in result.output


@pytest.mark.integration
class TestSystemCommands:
    """Test stats and destructive commands."""

    def test_stats(self, runner, session, make_response):
        session.request.return_value = make_response(
            200, {"uptime": 7200, "wifi_signal": -60, "ram": 1000, "matrix": True, "temp": 20.5}
        )
        result = invoke(runner, "system", "stats")
        assert result.exit_code == 0
        assert "Uptime: 7200 seconds (2.0 hours)" in result.output
        assert "Temperature: 20.5°C" in result.output
        assert "Battery" not in result.output

    def test_factory_reset_declined(self, runner, session):
        result = invoke(runner, "system", "factory-reset", input="n\n")
        assert result.exit_code == 0
        assert "Factory reset cancelled" in result.output
        session.request.assert_not_called()

    def test_factory_reset_confirmed_with_yes(self, runner, session):
        result = invoke(runner, "system", "factory-reset", "--yes")
        assert result.exit_code == 0
        assert requests_sent(session) == [("POST", f"{BASE}/api/erase", None)]


@pytest.mark.integration
class TestDeviceCommands:
    """Test the local device registry commands."""

    def test_add_list_remove(self, runner, session, make_response, config_path: Path):
        session.request.return_value = make_response(200, text="0.96\n")
        result = runner.invoke(cli, ["device", "add", "living", "192.168.1.100"])
        assert result.exit_code == 0, result.output
        assert "Connected successfully - Version: 0.96" in result.output
        assert "Set 'living' as default device" in result.output
        assert AppConfig.load_or_default(config_path).devices["living"].host == "192.168.1.100"

        result = runner.invoke(cli, ["device", "list"])
        assert "living: living at 192.168.1.100 (default)" in result.output
        assert "Status: Online - Version: 0.96" in result.output

        result = runner.invoke(cli, ["device", "remove", "living"])
        assert result.exit_code == 0
        assert AppConfig.load_or_default(config_path).devices == {}

    def test_remove_unknown(self, runner, config_path):
        result = runner.invoke(cli, ["device", "remove", "garage"])
        assert result.exit_code == 1
        assert "Error: Device 'garage' not found in config" in result.output

    def test_default_device_used(self, runner, session, config_path):
        config = AppConfig()
        config.add_device("office", "10.0.0.7")
        config.save(config_path)

        result = runner.invoke(cli, ["app", "previous"])
        assert result.exit_code == 0, result.output
        assert requests_sent(session) == [("POST", "http://10.0.0.7/api/previousapp", None)]

    def test_add_unreachable_saves_nothing(self, runner, session, config_path: Path):
        session.request.side_effect = requests.ConnectionError("refused")
        result = runner.invoke(cli, ["device", "add", "living", "192.168.1.100"])
        assert result.exit_code == 1
        assert "Could not reach device at http://192.168.1.100/version" in result.output
        assert not config_path.exists()

    def test_add_without_check(self, runner, session, config_path: Path):
        result = runner.invoke(cli, ["device", "add", "living", "192.168.1.100", "--no-check"])
        assert result.exit_code == 0, result.output
        session.request.assert_not_called()
        assert "living" in AppConfig.load_or_default(config_path).devices

    def test_list_reports_offline(self, runner, session, config_path: Path):
        config = AppConfig()
        config.add_device("garage", "10.0.0.8")
        config.save(config_path)
        session.request.side_effect = requests.ConnectTimeout("slow")

        result = runner.invoke(cli, ["device", "list"])
        assert result.exit_code == 0, result.output
        assert "garage: garage at 10.0.0.8 (default)" in result.output
        assert "Status: Offline or unreachable" in result.output

    def test_device_test_times_calls(self, runner, session, device_responder, config_path: Path):
        config = AppConfig()
        config.add_device("office", "10.0.0.7")
        config.save(config_path)
        session.request.side_effect = device_responder()

        result = runner.invoke(cli, ["device", "test", "office"])
        assert result.exit_code == 0, result.output
        assert "Host: http://10.0.0.7/" in result.output
        assert "Version API: 0.96 (" in result.output
        assert "Stats API: OK (" in result.output
        assert [url for _, url, _ in requests_sent(session)] == [
            "http://10.0.0.7/version", "http://10.0.0.7/api/stats"
        ]

    def test_device_test_reports_stats_failure(self, runner, session, make_response):
        session.request.side_effect = [make_response(200, text="0.96"), make_response(500, text="boom")]
        result = invoke(runner, "device", "test")
        assert result.exit_code == 0, result.output
        assert "Version API: 0.96" in result.output
        assert "Stats API failed: API error: boom (code: 500)" in result.output


@pytest.mark.integration
class TestWatchAndExtras:
    """Test custom watch, looped sounds and backups."""

    def test_watch_resends_file_and_survives_errors(
        self, runner, session, make_response, tmp_path: Path
    ):
        path = tmp_path / "weather.json"
        path.write_text('{"text": "21C"}')
        session.request.side_effect = [make_response(), make_response(500, text="busy")]

        with patch("awtrixctl.cli.commands.apps.time.sleep") as sleep:
            result = invoke(
                runner, "custom", "watch", "weather", str(path), "--interval", "5", "--cycles", "2"
            )

        assert result.exit_code == 0, result.output
        assert "Updated app 'weather' from file" in result.output
        assert "Failed to update app: API error: busy (code: 500)" in result.output
        sleep.assert_called_once_with(5)
        assert requests_sent(session) == [
            ("POST", f"{BASE}/api/custom?name=weather", {"text": "21C"}),
            ("POST", f"{BASE}/api/custom?name=weather", {"text": "21C"}),
        ]

    def test_watch_reports_bad_file(self, runner, session, tmp_path: Path):
        path = tmp_path / "weather.json"
        path.write_text("{oops")

        with patch("awtrixctl.cli.commands.apps.time.sleep"):
            result = invoke(runner, "custom", "watch", "weather", str(path), "--cycles", "1")

        assert result.exit_code == 0, result.output
        assert f"Failed to update app: Could not decode CustomApp from {path}" in result.output
        session.request.assert_not_called()

    def test_watch_stops_on_interrupt(self, runner, session, tmp_path: Path):
        path = tmp_path / "weather.json"
        path.write_text('{"text": "21C"}')

        with patch("awtrixctl.cli.commands.apps.time.sleep", side_effect=KeyboardInterrupt):
            result = invoke(runner, "custom", "watch", "weather", str(path))

        assert result.exit_code == 0, result.output
        assert "Stopped watching" in result.output
        assert len(requests_sent(session)) == 1

    def test_sound_loop(self, runner, session):
        result = invoke(runner, "sound", "play", "alarm", "--loop")
        assert result.exit_code == 0, result.output
        assert "Playing sound: alarm (looped)" in result.output
        assert requests_sent(session) == [
            ("POST", f"{BASE}/api/sound", {"sound": "alarm", "loopSound": True})
        ]

    def test_backup(self, runner, session, device_responder, settings_payload, tmp_path: Path):
        session.request.side_effect = device_responder(settings_payload)
        out = tmp_path / "backup.json"

        result = invoke(runner, "system", "backup", "-o", str(out))
        assert result.exit_code == 0, result.output
        assert f"Backup saved to: {out}" in result.output

        data = json.loads(out.read_text())
        assert data["host"] == f"{BASE}/"
        assert data["version"] == "0.96"
        assert data["stats"] == {"uptime": 7200, "wifiSignal": -60, "heap": 1000, "matrix": True}
        assert data["settings"] == settings_payload
        assert "createdAt" in data
