"""Form checks offered to callers before they submit a deploy."""

from __future__ import annotations

from typing import Any, Dict

from devtest_partner.modules.deployvs.domain.constants import (
    MSG_MISSING_ENDPOINT,
    MSG_MISSING_MAR_FILES,
    MSG_MISSING_VSE,
)


def builder_ok() -> Dict[str, Any]:
    return {"status": "ok", "message": ""}


def builder_error(msg: str) -> Dict[str, Any]:
    return {"status": "error", "message": msg}


def check_vse_name(vse_name: str) -> Dict[str, Any]:
    if not vse_name:
        return builder_error(MSG_MISSING_VSE)
    return builder_ok()


def check_mar_files_paths(mar_files_paths: str) -> Dict[str, Any]:
    if not mar_files_paths:
        return builder_error(MSG_MISSING_MAR_FILES)
    return builder_ok()


def check_host(use_custom_registry: bool, host: str, port: str) -> Dict[str, Any]:
    """A custom registry needs both host and port; the default one comes from settings."""
    if use_custom_registry and (not host or not port):
        return builder_error(MSG_MISSING_ENDPOINT)
    return builder_ok()
