"""Source abstractions for host access."""

from .base import (
    HostComposition,
    HostEase,
    HostInfo,
    HostLayer,
    HostProperty,
    PropertyValueType,
    Source,
)

__all__ = [
    "HostComposition",
    "HostEase",
    "HostInfo",
    "HostLayer",
    "HostProperty",
    "PropertyValueType",
    "Source",
]
