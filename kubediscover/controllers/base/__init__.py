"""Base controller classes."""

from kubediscover.controllers.base.base_controller import BaseController, ProgressCallback

__all__ = ["BaseController", "ProgressCallback"]
