import os
import sys
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .config import settings
from .schemas import ExtensionConfig
from .utils.files import display_name, read_file_bytes

# characters encodeURIComponent leaves untouched
_NAME_SAFE = "-_.!~*'()"

@dataclass
class UploadResult:
    path: str
    upload_name: str
    ok: bool
    response: Any = None
    error: str = ""

class UploadError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

def encode_file_name(name: str) -> str:
    # raw filesystem bytes, so undecodable names still encode
    return quote(os.fsencode(name), safe=_NAME_SAFE)

def files_url(project_id: str, api_base: Optional[str] = None) -> str:
    base = (api_base or settings.api_base).rstrip("/")
    return f"{base}/api/projects/{project_id}/files"

def make_client(transport: Optional[httpx.BaseTransport] = None) -> httpx.Client:
    return httpx.Client(timeout=settings.upload_timeout, transport=transport)

def _error_message(r: httpx.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return r.reason_phrase or f"HTTP {r.status_code}"

def send_file(client: httpx.Client, project_id: str, upload_name: str, content: bytes) -> Any:
    """POST raw bytes to the project's files endpoint and return the JSON reply.

    Raises UploadError on a non-2xx status or when the reply is not JSON.
    """
    headers = {
        "Content-Type": "application/octet-stream",
        "x-file-name": encode_file_name(upload_name),
    }
    r = client.post(files_url(project_id), headers=headers, content=content)
    if not r.is_success:
        raise UploadError(f"upload rejected: {_error_message(r)}", r.status_code)
    try:
        return r.json()
    except ValueError as e:
        raise UploadError(f"invalid response: {e}", r.status_code) from e

def upload_file(client: httpx.Client, path: str, project_id: str, config: ExtensionConfig) -> UploadResult:
    """Upload one file, reporting the outcome; failures are returned, never raised."""
    name = os.path.basename(path)
    shown = display_name(name)
    upload_name = config.upload_name(name)
    if upload_name != name:
        print(f"mapping file: {shown} -> {display_name(upload_name)}")
    try:
        content = read_file_bytes(path)
        print(f"uploading: {shown} ({len(content) / 1024:.2f} KB)")
        response = send_file(client, project_id, upload_name, content)
    except (UploadError, httpx.HTTPError, OSError, UnicodeError) as e:
        print(f"upload failed {shown}: {display_name(str(e))}", file=sys.stderr)
        return UploadResult(path=path, upload_name=upload_name, ok=False, error=str(e))
    print(f"upload ok: {shown}")
    return UploadResult(path=path, upload_name=upload_name, ok=True, response=response)
