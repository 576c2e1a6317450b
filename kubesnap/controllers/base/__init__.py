"""Base controller classes."""

from kubesnap.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
