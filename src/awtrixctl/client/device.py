"""Client for one AWTRIX3 device."""

import logging
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

import requests

from awtrixctl.exceptions import (
    ApiError,
    SerializationError,
    ValidationError,
    wrap_request_error,
)
from awtrixctl.models import (
    AppConfig,
    Color,
    CustomApp,
    LoopInfo,
    Notification,
    Settings,
    Stats,
    WireModel,
)

from .transport import DEFAULT_TIMEOUT, create_session, join_url, normalize_base_url

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=WireModel)

UNKNOWN_ERROR = "Unknown error"
INDICATORS = (1, 2, 3)
KELVIN_RANGE = (2000, 6500)


class DeviceClient:
    """
    HTTP client for an AWTRIX3 device.

    The client holds a base URL, a requests.Session and a fixed per-request
    timeout. It does not open a connection until the first request, never
    retries, and is not mutated after construction; ``with_session`` returns a
    copy bound to another session.

    Every request goes through ``_handle_response``: 2xx responses are
    returned for decoding, anything else raises ApiError with the status code
    and the body text sent by the device.

    Example:
        ```python
        with DeviceClient("192.168.1.100") as client:
            client.notify(Notification.builder().text("Hello").build())
            print(client.get_stats().uptime)
        ```
    """

    __slots__ = ("_base_url", "_session", "_timeout", "_owns_session")

    def __init__(
        self,
        host: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            host: Hostname, IP, or http(s) URL of the device
            session: Shared session (a pooled one is created if omitted)
            timeout: Per-request timeout in seconds

        Raises:
            UrlError: If ``host`` is malformed
        """
        self._base_url = normalize_base_url(host)
        self._owns_session = session is None
        self._session = session if session is not None else create_session()
        self._timeout = timeout

    @classmethod
    def for_device(
        cls,
        config: AppConfig,
        device: str | None = None,
        session: requests.Session | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "DeviceClient":
        """Resolve ``device`` through the configuration and build a client."""
        host = config.resolve_host(device, env)
        timeout = config.timeout_for(device, env) or DEFAULT_TIMEOUT
        return cls(host, session=session, timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def session(self) -> requests.Session:
        return self._session

    def with_session(self, session: requests.Session) -> "DeviceClient":
        """Copy of this client that sends through ``session``."""
        return DeviceClient(self._base_url, session=session, timeout=self._timeout)

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "DeviceClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DeviceClient({self._base_url!r}, timeout={self._timeout:g})"

    # =================================================================
    # Request plumbing
    # =================================================================

    def build_url(self, endpoint: str) -> str:
        """Resolve an endpoint such as ``/api/stats`` against the base URL."""
        return join_url(self._base_url, endpoint)

    def _request(self, method: str, endpoint: str, payload: Any = None) -> requests.Response:
        url = self.build_url(endpoint)
        logger.debug(f"{method} {url}")
        try:
            if payload is None:
                response = self._session.request(method, url, timeout=self._timeout)
            else:
                response = self._session.request(
                    method, url, json=payload, timeout=self._timeout
                )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise wrap_request_error(e, url, self._timeout) from e
        return self._handle_response(response, url)

    def _handle_response(self, response: requests.Response, url: str) -> requests.Response:
        status = response.status_code
        if 200 <= status < 300:
            return response

        try:
            message = response.text or UNKNOWN_ERROR
        except requests.RequestException:
            message = UNKNOWN_ERROR
        finally:
            response.close()

        logger.error(f"{url} returned HTTP {status}: {message}")
        raise ApiError(message, status, url)

    def get(self, endpoint: str) -> requests.Response:
        """GET ``endpoint``."""
        return self._request("GET", endpoint)

    def post(self, endpoint: str) -> requests.Response:
        """POST ``endpoint`` without a body."""
        return self._request("POST", endpoint)

    def post_json(self, endpoint: str, payload: Any) -> requests.Response:
        """POST ``payload`` as JSON; WireModels are sent in their sparse form."""
        if isinstance(payload, WireModel):
            payload = payload.to_payload()
        return self._request("POST", endpoint, payload)

    @staticmethod
    def parse_model(response: requests.Response, model_type: type[M]) -> M:
        """Decode a JSON response body into ``model_type``."""
        return model_type.from_json(response.content, source=response.url)

    @staticmethod
    def parse_json(response: requests.Response) -> Any:
        """Decode a JSON response body into plain Python values."""
        try:
            return response.json()
        except ValueError as e:
            raise SerializationError("JSON response", str(e), response.url) from e

    def _get_names(self, endpoint: str) -> list[str]:
        data = self.parse_json(self.get(endpoint))
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, str)]

    # =================================================================
    # Power
    # =================================================================

    def set_power(self, on: bool) -> None:
        """Turn the matrix on or off."""
        self.post_json("/api/power", {"power": on})

    def set_sleep(self, seconds: int) -> None:
        """Put the device into deep sleep for ``seconds``."""
        if seconds < 0:
            raise ValidationError(f"Sleep duration must be non-negative, got {seconds}")
        self.post_json("/api/sleep", {"sleep": seconds})

    # =================================================================
    # Notifications and apps
    # =================================================================

    def notify(self, notification: Notification) -> None:
        self.post_json("/api/notify", notification)

    def dismiss_notification(self) -> None:
        self.post("/api/notify/dismiss")

    def get_apps(self) -> LoopInfo:
        return self.parse_model(self.get("/api/loop"), LoopInfo)

    def next_app(self) -> None:
        self.post("/api/nextapp")

    def previous_app(self) -> None:
        self.post("/api/previousapp")

    def switch_app(self, name: str) -> None:
        self.post_json("/api/switch", {"name": name})

    def create_custom_app(self, name: str, app: CustomApp) -> None:
        """Create or replace the custom app ``name``."""
        self.post_json(f"/api/custom?name={quote(name, safe='')}", app)

    def delete_custom_app(self, name: str) -> None:
        """Delete the custom app ``name`` (an empty payload removes it)."""
        self.post_json(f"/api/custom?name={quote(name, safe='')}", {})

    # =================================================================
    # Display, indicators, sound
    # =================================================================

    def set_mood_light(
        self,
        brightness: int | None = None,
        color: Color | None = None,
        kelvin: int | None = None,
    ) -> None:
        """
        Set the mood light; only the given fields are sent.

        Raises:
            ValidationError: If brightness or kelvin is out of range, or both
                color and kelvin are given
        """
        if color is not None and kelvin is not None:
            raise ValidationError("Mood light takes either a color or a kelvin value, not both")
        if kelvin is not None and not KELVIN_RANGE[0] <= kelvin <= KELVIN_RANGE[1]:
            raise ValidationError(
                f"Color temperature must be between {KELVIN_RANGE[0]}K and {KELVIN_RANGE[1]}K"
            )
        if brightness is not None and not 0 <= brightness <= 255:
            raise ValidationError(f"Brightness must be 0-255, got {brightness}")

        payload: dict[str, Any] = {}
        if brightness is not None:
            payload["brightness"] = brightness
        if color is not None:
            payload["color"] = color.model_dump()
        if kelvin is not None:
            payload["kelvin"] = kelvin
        self.post_json("/api/moodlight", payload)

    def set_indicator(self, indicator: int, color: Color | None) -> None:
        """
        Light indicator 1-3 with ``color``, or turn it off when color is None.

        Raises:
            ValidationError: If the indicator number is not 1-3
        """
        if indicator not in INDICATORS:
            raise ValidationError(f"Indicator number must be 1-3, got {indicator}")
        payload = {"color": color.model_dump()} if color is not None else {}
        self.post_json(f"/api/indicator{indicator}", payload)

    def play_sound(self, sound: str, loop: bool = False) -> None:
        """Play a sound file stored on the device; ``loop`` asks the firmware to repeat it."""
        payload: dict[str, Any] = {"sound": sound}
        if loop:
            payload["loopSound"] = True
        self.post_json("/api/sound", payload)

    def play_rtttl(self, rtttl: str) -> None:
        self.post_json("/api/rtttl", {"rtttl": rtttl})

    def play_r2d2(self) -> None:
        self.post("/api/r2d2")

    # =================================================================
    # Information
    # =================================================================

    def get_stats(self) -> Stats:
        return self.parse_model(self.get("/api/stats"), Stats)

    def get_version(self) -> str:
        return self.get("/version").text.strip()

    def get_effects(self) -> list[str]:
        """Effect names reported by the device."""
        return self._get_names("/api/effects")

    def get_transitions(self) -> list[str]:
        """Transition names reported by the device."""
        return self._get_names("/api/transitions")

    # =================================================================
    # Settings and system
    # =================================================================

    def get_settings(self) -> Settings:
        return self.parse_model(self.get("/api/settings"), Settings)

    def update_settings(self, settings: Settings) -> None:
        """Send the fields of ``settings`` that are set."""
        self.post_json("/api/settings", settings)

    def reboot(self) -> None:
        self.post("/api/reboot")

    def factory_reset(self) -> None:
        """Erase all settings and data on the device."""
        self.post("/api/erase")

    def reset_settings(self) -> None:
        self.post("/api/resetSettings")

    def save_config(self) -> None:
        self.post("/save")
