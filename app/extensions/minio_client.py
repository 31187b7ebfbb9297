import logging
from threading import Lock

import urllib3
from flask import current_app
from minio import Minio


logger = logging.getLogger(__name__)

_client = None
_client_settings = None
_client_lock = Lock()


def _current_settings():
    config = current_app.config
    return (
        config["MINIO_ENDPOINT"],
        config["MINIO_ACCESS_KEY"],
        config["MINIO_SECRET_KEY"],
        config["MINIO_SECURE"],
        config["MINIO_CONNECT_TIMEOUT"],
        config["MINIO_READ_TIMEOUT"],
        config.get("MINIO_HTTP_POOL_MAXSIZE", 32),
    )


def get_minio_client():
    """Return a process-wide Minio client, rebuilt when the app config changes."""
    global _client, _client_settings

    settings = _current_settings()
    with _client_lock:
        if _client is not None and _client_settings == settings:
            return _client

        endpoint, access_key, secret_key, secure, connect_timeout, read_timeout, pool_size = settings

        # No retries: a failed media call fails its request.
        http_client = urllib3.PoolManager(
            timeout=urllib3.Timeout(connect=connect_timeout, read=read_timeout),
            retries=False,
            maxsize=pool_size,
        )
        _client = Minio(
            endpoint,
            access_key=access_key,
            secret_key=secret_key,
            secure=secure,
            http_client=http_client,
        )
        _client_settings = settings
        logger.info("Connected media client to %s", endpoint)
        return _client
