"""Virtual service deploy module exports."""

from .service import VirtualServiceDeployer
from .controller import router as deployvs_router

__all__ = ["VirtualServiceDeployer", "deployvs_router"]
