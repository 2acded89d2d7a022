"""Base abstractions for host sources.

This module defines the narrow host-object surface the extractors read and
the Source interface that supplies compositions to the pipeline.

Host objects are live and unreliable: every attribute read and every method
call may raise. The protocols below only describe the names the extractors
use; nothing in the core assumes any of them succeed.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class PropertyValueType(str, Enum):
    """Kind of value a host property holds."""

    NO_VALUE = "NO_VALUE"
    ONE_D = "ONE_D"
    TWO_D = "TWO_D"
    TWO_D_SPATIAL = "TWO_D_SPATIAL"
    THREE_D = "THREE_D"
    THREE_D_SPATIAL = "THREE_D_SPATIAL"
    COLOR = "COLOR"
    SHAPE = "SHAPE"
    TEXT_DOCUMENT = "TEXT_DOCUMENT"
    MARKER = "MARKER"
    LAYER_INDEX = "LAYER_INDEX"
    MASK_INDEX = "MASK_INDEX"
    CUSTOM_VALUE = "CUSTOM_VALUE"


@runtime_checkable
class HostEase(Protocol):
    """One dimension of a keyframe's temporal ease handle."""

    speed: float
    influence: float  # Percentage, 0-100


@runtime_checkable
class HostProperty(Protocol):
    """A host property or property group.

    Groups answer ``num_properties`` and ``property``; leaves answer the
    value and keyframe queries. Keyframe indices are 1-based.
    """

    name: str
    match_name: str

    @property
    def num_properties(self) -> int: ...

    @property
    def value_type(self) -> PropertyValueType: ...

    @property
    def value(self) -> Any: ...

    @property
    def num_keys(self) -> int: ...

    def key_time(self, index: int) -> float: ...

    def key_value(self, index: int) -> Any: ...

    def key_in_interpolation_type(self, index: int) -> Any: ...

    def key_out_interpolation_type(self, index: int) -> Any: ...

    def key_in_temporal_ease(self, index: int) -> list[HostEase]: ...

    def key_out_temporal_ease(self, index: int) -> list[HostEase]: ...

    # Keep after every @property in this class
    def property(self, index_or_name: int | str) -> "HostProperty": ...


@runtime_checkable
class HostLayer(Protocol):
    """A layer of a host composition."""

    index: int
    name: str
    match_name: str

    def property(self, index_or_name: int | str) -> HostProperty: ...


@runtime_checkable
class HostComposition(Protocol):
    """A host composition with 1-based layer access."""

    name: str
    type_name: str  # "Composition"
    width: int
    height: int
    duration: float
    frame_duration: float

    @property
    def num_layers(self) -> int: ...

    def layer(self, index: int) -> HostLayer: ...


@dataclass
class HostInfo:
    """Description of the host environment for the export envelope.

    Attributes:
        name: Host application name
        version: Host application version string
        project_file: Path of the host project, or None when unsaved
    """

    name: str | None = None
    version: str | None = None
    project_file: str | None = None


class Source(ABC):
    """Abstract base class for all host sources.

    Implementations adapt a specific host (a live scripting bridge, a
    recorded snapshot, ...) to the host protocols above. The pipeline only
    talks to this interface.
    """

    @abstractmethod
    def get_active_composition(self) -> HostComposition | None:
        """Return the composition the user is working on.

        Returns:
            The active composition, or None when there is none
        """
        pass

    @abstractmethod
    def list_compositions(self) -> list[HostComposition]:
        """List all compositions of the host project.

        Returns:
            Compositions in host project order
        """
        pass

    @abstractmethod
    def get_composition(self, name: str) -> HostComposition:
        """Retrieve a composition by name.

        Args:
            name: Composition name

        Returns:
            The requested composition

        Raises:
            KeyError: If no composition has that name
        """
        pass

    def get_host_info(self) -> HostInfo:
        """Describe the host for the document's export info.

        Returns:
            HostInfo, with unknown fields left as None
        """
        return HostInfo()
