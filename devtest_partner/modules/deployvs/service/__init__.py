"""Service exports."""

from .deployer import VirtualServiceDeployer
from .validation import check_host, check_mar_files_paths, check_vse_name

__all__ = ["VirtualServiceDeployer", "check_host", "check_mar_files_paths", "check_vse_name"]
