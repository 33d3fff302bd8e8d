from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from ..uploads import guess_content_type, guess_filename

if TYPE_CHECKING:
    from ..client import WorqHatClient, Result

FilePart = Tuple[str, Tuple[Optional[str], bytes, Optional[str]]]


class Endpoint:
    """Base class for a family of remote operations sharing one client."""

    def __init__(self, client: "WorqHatClient"):
        self._client = client

    async def _post_json(
        self,
        path: str,
        body: Dict[str, Any],
        action: str,
        stream: bool = False,
        timed: bool = False,
    ) -> "Result":
        return await self._client.request(
            "POST", path, json=body, stream=stream, timed=timed, action=action
        )

    async def _post_form(
        self,
        path: str,
        files: List[FilePart],
        action: str,
        fields: Optional[Dict[str, Any]] = None,
        stream: bool = False,
        timed: bool = False,
    ) -> "Result":
        data = {k: _form_value(v) for k, v in (fields or {}).items() if v is not None}
        return await self._client.request(
            "POST",
            path,
            data=data or None,
            files=files,
            stream=stream,
            timed=timed,
            action=action,
        )

    async def _file_part(
        self, field: str, source: Any, default_name: str, default_type: str
    ) -> FilePart:
        """Upload part whose name and MIME type follow the source filename."""
        content = await self._client.read_file(source)
        filename = guess_filename(source, default_name)
        return field, (filename, content, guess_content_type(filename, default_type))

    async def _image_part(self, field: str, source: Any, filename: str = "image.jpg") -> FilePart:
        content = await self._client.read_file(source)
        return field, (filename, content, "image/jpeg")


def field_part(field: str, value: Any) -> FilePart:
    """Plain form field carried in the files list, which keeps the body multipart."""
    return field, (None, _form_value(value).encode("utf-8"), None)


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
