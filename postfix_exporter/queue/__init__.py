"""Postfix queue sampling."""

from .age import QueueAgeSampler
from .size import QueueSizeSampler

__all__ = ["QueueAgeSampler", "QueueSizeSampler"]
