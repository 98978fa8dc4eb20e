"""Asset-related services (e.g., image downloads).

Network I/O is isolated here to keep the decode/test flows clean and mockable.
"""
from __future__ import annotations

import logging
import ssl
import urllib.request

from .errors import AssetDownloadError


logger = logging.getLogger(__name__)


def fetch_image_bytes(url: str, timeout: int = 10) -> bytes:
    """Download an image from ``url`` and return its raw bytes.

    Raises ``AssetDownloadError`` on any network failure.
    """
    logger.info("Downloading image: %s", url)

    ssl_context = ssl.create_default_context()
    ssl_context.check_hostname = False
    ssl_context.verify_mode = ssl.CERT_NONE

    try:
        request = urllib.request.Request(url, headers={"User-Agent": "Mozilla/5.0"})
        with urllib.request.urlopen(request, context=ssl_context, timeout=timeout) as response:
            data = response.read()
        logger.debug("Fetched %d bytes from %s", len(data), url)
        return data
    except Exception as e:
        logger.error("Failed to download image from %s: %s", url, e)
        raise AssetDownloadError(str(e))
