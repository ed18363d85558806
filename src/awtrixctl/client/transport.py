"""HTTP transport setup and URL handling."""

import logging
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from requests.adapters import HTTPAdapter

from awtrixctl import __version__
from awtrixctl.exceptions import UrlError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"awtrixctl/{__version__}"


def create_session(
    pool_connections: int = 1,
    pool_maxsize: int = 10,
    compression: bool = True,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build the pooled HTTP session shared by every request of one invocation.

    Args:
        pool_connections: Number of host pools to cache
        pool_maxsize: Idle connections kept per host
        compression: Ask the device for gzip/deflate encoded responses
        user_agent: User-Agent header value

    Returns:
        A configured requests.Session. Requests are never retried.
    """
    session = requests.Session()
    adapter = HTTPAdapter(
        pool_connections=pool_connections, pool_maxsize=pool_maxsize, max_retries=0
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = user_agent
    session.headers["Accept-Encoding"] = "gzip, deflate" if compression else "identity"
    return session


def normalize_base_url(host: str) -> str:
    """
    Turn a host, IP or URL into a base URL ending in ``/``.

    ``http://`` is prepended unless the host already has an http(s) scheme.

    Raises:
        UrlError: If the result is not a usable URL
    """
    if not isinstance(host, str) or not host.strip():
        raise UrlError(str(host), "empty host")
    if any(ch.isspace() for ch in host):
        raise UrlError(host, "host contains whitespace")

    if host.startswith("http://") or host.startswith("https://"):
        url = host
    else:
        url = f"http://{host}"

    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as e:
        raise UrlError(host, str(e)) from e

    if not parts.hostname:
        raise UrlError(host, "missing host name")

    path = parts.path if parts.path.endswith("/") else parts.path + "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def join_url(base_url: str, endpoint: str) -> str:
    """
    Resolve a relative endpoint against the base URL.

    Raises:
        UrlError: If the endpoint is empty, contains whitespace, or points
            at a different origin
    """
    if not endpoint or any(ch.isspace() for ch in endpoint):
        raise UrlError(endpoint, "malformed endpoint")

    url = urljoin(base_url, endpoint)
    base, joined = urlsplit(base_url), urlsplit(url)
    if (joined.scheme, joined.netloc) != (base.scheme, base.netloc):
        raise UrlError(endpoint, f"endpoint leaves {base.scheme}://{base.netloc}")
    return url
