"""宿主资源模型."""

from select_toggle.resources.base import Resource
from select_toggle.resources.registry import ResourceRegistry

__all__ = ["Resource", "ResourceRegistry"]
