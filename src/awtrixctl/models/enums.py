"""Enumerations for the AWTRIX3 API."""

from enum import Enum


class Effect(str, Enum):
    """Background effects known to the firmware."""

    BRICK_BREAKER = "BrickBreaker"
    PING_PONG = "PingPong"
    RAINBOW = "Rainbow"
    COLOR_WAVES = "ColorWaves"
    THEATER_CHASE = "TheaterChase"
    FIREWORKS = "Fireworks"
    MATRIX = "Matrix"
    SWIRL_OUT = "SwirlOut"
    SWIRL_IN = "SwirlIn"
    PACIFICA = "Pacifica"
    TWINKLE_FOX = "TwinkleFox"
    PLASMA_CLOUD = "PlasmaCloud"
    LOOKING_EYES = "LookingEyes"
    RIPPLE = "Ripple"
    FIRE = "Fire"
    HEART_BEAT = "HeartBeat"
    FADE = "Fade"
    NONE = "None"

    @classmethod
    def parse(cls, name: str) -> "Effect":
        """Map a name to an effect; unknown names become NONE."""
        try:
            return cls(name)
        except ValueError:
            return cls.NONE


class Transition(str, Enum):
    """App transition effects known to the firmware."""

    SLIDE = "Slide"
    DIM = "Dim"
    ZOOM = "Zoom"
    ROTATE = "Rotate"
    PIXELIZE = "Pixelize"
    CURTAIN = "Curtain"
    RIPPLE = "Ripple"
    BLINK = "Blink"
    RELOAD = "Reload"
    FADE = "Fade"
    NONE = "None"

    @classmethod
    def parse(cls, name: str) -> "Transition":
        """Map a name to a transition; unknown names become NONE."""
        try:
            return cls(name)
        except ValueError:
            return cls.NONE


class PowerState(str, Enum):
    """Matrix power state."""

    ON = "on"
    OFF = "off"

    @property
    def is_on(self) -> bool:
        return self is PowerState.ON
