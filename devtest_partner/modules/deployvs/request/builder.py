"""Build the multipart body for a single MAR path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from devtest_partner.modules.deployvs.domain import MarFileNotFoundError, MultipartBody
from devtest_partner.modules.deployvs.domain.constants import MSG_MISSING_FILE
from devtest_partner.modules.deployvs.resolver import is_remote_reference

LineSink = Callable[[str], None]


class RequestBuilder:
    """Decide between a ``fileURI`` reference and a ``file`` upload.

    Paths mentioning "file" or "http" are left to the registry to fetch, so
    they are never looked up locally. Everything else must be a file inside
    the workspace.
    """

    def __init__(self, workspace: Union[str, Path]) -> None:
        self.workspace = Path(workspace)
        self.log = logging.getLogger(self.__class__.__name__)

    def build(self, mar_path: str, log_line: Optional[LineSink] = None) -> MultipartBody:
        if is_remote_reference(mar_path):
            self.log.debug("Using remote reference %s", mar_path)
            return MultipartBody.file_uri(mar_path)

        target = self.workspace / mar_path
        try:
            if not target.is_file():
                raise FileNotFoundError(str(target))
            content = target.read_bytes()
        except OSError as exc:
            message = MSG_MISSING_FILE.format(path=mar_path)
            self.log.warning("%s (%s)", message, exc)
            if log_line:
                log_line(message)
            raise MarFileNotFoundError(mar_path) from exc

        self.log.debug("Uploading %s (%d bytes)", target, len(content))
        return MultipartBody.upload(target.name, content)
