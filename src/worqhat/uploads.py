"""
Input normalization for file and image uploads.

Accepts a file reference in one of several shapes and turns it into a
base64 payload:

1. a file handle (anything with ``read()``), raw ``bytes`` or a
   ``{"path": ...}`` descriptor
2. an ``http://`` / ``https://`` URL, fetched as binary
3. a ``data:`` URI, whose payload is already base64
4. a local filesystem path
"""

import base64
import binascii
import mimetypes
import os
from io import BytesIO
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

import httpx
from PIL import Image, UnidentifiedImageError

from .config import get_logger
from .core.remote import normalize_transport_error, make_api_error
from .exceptions import InvalidInputError, ImageDimensionError, UnsupportedFormatError

logger = get_logger("uploads")

DEFAULT_FETCH_TIMEOUT = 30.0


def encode_bytes(content: bytes) -> str:
    """Encode binary content as base64 string."""
    return base64.b64encode(content).decode("utf-8")


def decode_base64(payload: str) -> bytes:
    """Decode a base64 payload, rejecting malformed input."""
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInputError(f"Invalid base64 data: {e}") from e


def _read_handle(handle: Any) -> bytes:
    content = handle.read()
    if isinstance(content, str):
        content = content.encode("utf-8")
    if not isinstance(content, (bytes, bytearray)):
        raise UnsupportedFormatError(
            f"File handle returned unsupported content type: {type(content).__name__}"
        )
    return bytes(content)


def _read_path(path: Union[str, "os.PathLike[str]"]) -> bytes:
    file_path = Path(path)
    if not file_path.is_file():
        raise InvalidInputError(f"File not found: {path}", {"path": str(path)})
    return file_path.read_bytes()


async def _fetch_url(
    url: str, http_client: Optional[httpx.AsyncClient], timeout: float
) -> bytes:
    logger.debug("Fetching remote file %s", url)
    try:
        if http_client is not None:
            response = await http_client.get(url)
        else:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(timeout), follow_redirects=True
            ) as client:
                response = await client.get(url)
    except httpx.HTTPError as e:
        raise normalize_transport_error(e) from e

    if response.status_code >= 400:
        raise make_api_error(
            response.status_code,
            f"Unable to fetch {url}",
            response.reason_phrase,
        )
    return response.content


def _data_uri_payload(uri: str) -> str:
    _, separator, payload = uri.partition(",")
    if not separator or not payload:
        raise InvalidInputError("Data URI does not contain any data")
    decode_base64(payload)
    return payload


async def read_as_base64(
    source: Any,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> str:
    """Normalize a file reference into a base64 string."""
    if hasattr(source, "read"):
        logger.debug("Processing input of type file handle")
        return encode_bytes(_read_handle(source))

    if isinstance(source, (bytes, bytearray)):
        logger.debug("Processing input of type bytes")
        return encode_bytes(bytes(source))

    if isinstance(source, Mapping):
        if "path" not in source:
            raise UnsupportedFormatError(
                "File descriptor must contain a 'path' key",
                {"keys": sorted(str(k) for k in source)},
            )
        logger.debug("Processing input of type file descriptor: %s", source["path"])
        return encode_bytes(_read_path(source["path"]))

    if isinstance(source, str):
        if source.startswith(("http://", "https://")):
            return encode_bytes(await _fetch_url(source, http_client, timeout))

        if source.startswith("data:"):
            logger.debug("Processing input of type data URI")
            return _data_uri_payload(source)

        logger.debug("Processing input of type file path: %s", source)
        return encode_bytes(_read_path(source))

    if isinstance(source, os.PathLike):
        logger.debug("Processing input of type file path: %s", source)
        return encode_bytes(_read_path(source))

    raise UnsupportedFormatError(
        f"Unsupported input type: {type(source).__name__}. Expected a URL, data "
        "URI, file path or file object.",
        {"type": type(source).__name__},
    )


async def read_as_bytes(source: Any, **kwargs: Any) -> bytes:
    """Normalize a file reference into raw bytes ready for multipart upload."""
    return decode_base64(await read_as_base64(source, **kwargs))


def guess_filename(source: Any, default: str) -> str:
    """Best-effort filename for a multipart part."""
    name = None
    if isinstance(source, Mapping):
        name = source.get("name") or source.get("path")
    elif isinstance(source, (str, os.PathLike)):
        text = os.fspath(source)
        if not text.startswith(("http://", "https://", "data:")):
            name = text
    else:
        name = getattr(source, "name", None)

    if isinstance(name, (str, os.PathLike)) and Path(name).name:
        return Path(name).name
    return default


def guess_content_type(filename: str, default: str) -> str:
    content_type, _ = mimetypes.guess_type(filename)
    return content_type or default


def image_size(content: bytes) -> Tuple[int, int]:
    """Return the (width, height) of an encoded image."""
    try:
        with Image.open(BytesIO(content)) as image:
            return image.size
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDimensionError(f"Unable to read image dimensions: {e}") from e
