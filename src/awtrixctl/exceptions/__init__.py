"""
Custom exception hierarchy for awtrixctl.

## Exception Hierarchy

```
AwtrixError (base)
├── ValidationError
│   ├── InvalidColorError
│   ├── UnknownColorError
│   ├── InvalidIconError
│   ├── UnknownSettingError
│   └── InvalidSettingValueError
├── DeviceError
│   ├── ApiError
│   ├── DeviceTransportError
│   │   └── DeviceTimeoutError
│   └── UrlError
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   ├── ConfigValidationError
│   ├── DeviceNotFoundError
│   └── NoDeviceError
└── SerializationError
```

All custom exceptions inherit from `AwtrixError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Device rejected a request

```python
from awtrixctl.exceptions import ApiError

try:
    client.update_settings(settings)
except ApiError as e:
    print(e.code, e.message)   # 400 "bad request"
```

Validation errors are raised before any request is sent; device errors are
never retried by the client.
"""

from .base import AwtrixError, SerializationError
from .config import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceNotFoundError,
    NoDeviceError,
)
from .device import ApiError, DeviceError, DeviceTimeoutError, DeviceTransportError, UrlError
from .handlers import format_error_for_display, wrap_pydantic_error, wrap_request_error
from .validation import (
    InvalidColorError,
    InvalidIconError,
    InvalidSettingValueError,
    UnknownColorError,
    UnknownSettingError,
    ValidationError,
)

__all__ = [
    # Device
    "ApiError",
    # Base
    "AwtrixError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "DeviceError",
    "DeviceNotFoundError",
    "DeviceTimeoutError",
    "DeviceTransportError",
    # Validation
    "InvalidColorError",
    "InvalidIconError",
    "InvalidSettingValueError",
    "NoDeviceError",
    "SerializationError",
    "UnknownColorError",
    "UnknownSettingError",
    "UrlError",
    "ValidationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_request_error",
]
