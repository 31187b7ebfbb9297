"""
Media gateway backed by a MinIO (S3 compatible) bucket.

Objects are stored as ``{resource_type}/{public_id}.{ext}`` and exposed through
``MINIO_PUBLIC_BASE_URL``. Stored URLs are the only handle the rest of the
application keeps, so deletion works backwards from the URL.
"""
import base64
import binascii
import io
import logging
import re
import uuid
from urllib.parse import urlparse

from flask import current_app

from app.errors import MediaStorageError, ValidationError
from app.extensions.minio_client import get_minio_client


logger = logging.getLogger(__name__)

RESOURCE_IMAGE = "image"
RESOURCE_VIDEO = "video"

ALLOWED_IMAGE_MIME_TYPES = {
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
}

ALLOWED_VIDEO_MIME_TYPES = {
    "video/mp4",
    "video/quicktime",
    "video/webm",
}

_VIDEO_EXTENSION_RE = re.compile(r"\.(mp4|mov|avi|webm)$", re.IGNORECASE)
_DATA_URI_RE = re.compile(r"^data:(?P<mimetype>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


def _extension_for_mimetype(mimetype: str) -> str:
    mapping = {
        "image/jpeg": "jpg",
        "image/png": "png",
        "image/webp": "webp",
        "image/gif": "gif",
        "video/mp4": "mp4",
        "video/quicktime": "mov",
        "video/webm": "webm",
    }
    return mapping.get(mimetype, mimetype.split("/")[-1])


def resource_type_for_mimetype(mimetype: str) -> str:
    if mimetype in ALLOWED_VIDEO_MIME_TYPES:
        return RESOURCE_VIDEO
    if mimetype in ALLOWED_IMAGE_MIME_TYPES:
        return RESOURCE_IMAGE
    raise ValidationError(f"Unsupported media type: {mimetype}")


def media_identifiers(url: str):
    """Derive ``(public_id, resource_type)`` from a stored media URL."""
    path = urlparse(url).path or url
    public_id = path.rstrip("/").split("/")[-1].split(".")[0]
    is_video = "/video/" in path or _VIDEO_EXTENSION_RE.search(path) is not None
    return public_id, RESOURCE_VIDEO if is_video else RESOURCE_IMAGE


def build_media_url(object_name: str) -> str:
    return (
        f"{current_app.config['MINIO_PUBLIC_BASE_URL'].rstrip('/')}/"
        f"{current_app.config['MINIO_BUCKET']}/"
        f"{object_name}"
    )


def _get_stream_and_length(stream):
    try:
        stream.seek(0, 2)
        length = stream.tell()
        stream.seek(0)
        return stream, length
    except (AttributeError, OSError):
        return stream, -1


def _read_source(source):
    """Return ``(stream, mimetype)`` for an uploaded file or a base64 data URI."""
    if isinstance(source, str):
        match = _DATA_URI_RE.match(source.strip())
        if not match:
            raise ValidationError("Media must be an uploaded file or a base64 data URI")
        try:
            data = base64.b64decode(match.group("data"), validate=True)
        except (binascii.Error, ValueError):
            raise ValidationError("Media data is not valid base64")
        return io.BytesIO(data), match.group("mimetype").lower()

    if not getattr(source, "filename", ""):
        raise ValidationError("Media file is required")
    stream = getattr(source, "stream", source)
    mimetype = (getattr(source, "mimetype", None) or "").lower()
    return stream, mimetype


def validate_media(source):
    """Check an upload before anything is stored or removed.

    Returns ``(stream, mimetype, resource_type)`` for :func:`store_media`.
    """
    stream, mimetype = _read_source(source)
    return stream, mimetype, resource_type_for_mimetype(mimetype)


def store_media(validated) -> str:
    stream, mimetype, resource_type = validated
    public_id = uuid.uuid4().hex
    object_name = f"{resource_type}/{public_id}.{_extension_for_mimetype(mimetype)}"
    bucket = current_app.config["MINIO_BUCKET"]

    try:
        minio = get_minio_client()
        if not minio.bucket_exists(bucket_name=bucket):
            minio.make_bucket(bucket_name=bucket)

        data, length = _get_stream_and_length(stream)
        upload_kwargs = {
            "bucket_name": bucket,
            "object_name": object_name,
            "data": data,
            "length": length,
            "content_type": mimetype,
        }
        if length == -1:
            upload_kwargs["part_size"] = 10 * 1024 * 1024

        minio.put_object(**upload_kwargs)
    except Exception as e:
        raise MediaStorageError("Media storage is unavailable") from e

    logger.info("Uploaded %s %s", resource_type, object_name)
    return build_media_url(object_name)


def upload_media(source) -> str:
    return store_media(validate_media(source))


def destroy_media(url: str) -> int:
    """Remove every stored object for ``url``; returns how many were removed."""
    public_id, resource_type = media_identifiers(url)
    if not public_id:
        return 0

    bucket = current_app.config["MINIO_BUCKET"]
    try:
        minio = get_minio_client()
        removed = 0
        for obj in minio.list_objects(bucket_name=bucket, prefix=f"{resource_type}/{public_id}"):
            minio.remove_object(bucket_name=bucket, object_name=obj.object_name)
            removed += 1
    except Exception as e:
        raise MediaStorageError("Media storage is unavailable") from e

    logger.info("Removed %d %s object(s) for %s", removed, resource_type, public_id)
    return removed


def destroy_media_quietly(url: str) -> bool:
    """Best-effort delete: failures are logged and never raised."""
    try:
        destroy_media(url)
        return True
    except MediaStorageError as e:
        logger.warning("Could not delete media %s: %s", url, e.__cause__ or e)
        return False
