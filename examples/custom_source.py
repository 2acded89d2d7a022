"""Template for implementing a custom source.

This example demonstrates the complete pattern for connecting a new host:
- Host objects exposing the names the extractors read
- Source implementation
- Registration with SourceRegistry

Host objects only need the attributes and methods listed in
motion_spec_extractor.sources.base. Anything they cannot answer should raise;
the extractors record the facet as missing and carry on.
"""

from typing import Any

from motion_spec_extractor import SourceRegistry, to_json
from motion_spec_extractor.sources.base import HostInfo, PropertyValueType, Source


# Step 1: Define host objects
class OpacityProperty:
    """A keyed 1D property with linear keyframes."""

    name = "Opacity"
    match_name = "ADBE Opacity"
    value_type = PropertyValueType.ONE_D

    def __init__(self, keys: list[tuple[float, float]]):
        self._keys = keys

    @property
    def value(self) -> float:
        return self._keys[-1][1]

    @property
    def num_keys(self) -> int:
        return len(self._keys)

    def key_time(self, index: int) -> float:
        return self._keys[index - 1][0]

    def key_value(self, index: int) -> float:
        return self._keys[index - 1][1]

    def key_in_interpolation_type(self, index: int) -> str:
        return "LINEAR"

    def key_out_interpolation_type(self, index: int) -> str:
        return "LINEAR"


class TransformGroup:
    name = "Transform"
    match_name = "ADBE Transform Group"

    def __init__(self, opacity: OpacityProperty):
        self._opacity = opacity

    @property
    def num_properties(self) -> int:
        return 1

    def property(self, index_or_name: int | str) -> Any:
        if index_or_name in (1, "ADBE Opacity", "Opacity"):
            return self._opacity
        raise KeyError(index_or_name)


class Layer:
    match_name = "ADBE AV Layer"
    null_layer = True

    def __init__(self, index: int, name: str, fade: list[tuple[float, float]]):
        self.index = index
        self.name = name
        self._transform = TransformGroup(OpacityProperty(fade))

    def property(self, index_or_name: int | str) -> Any:
        if index_or_name == "ADBE Transform Group":
            return self._transform
        raise KeyError(index_or_name)


class Composition:
    type_name = "Composition"

    def __init__(self, name: str, layers: list[Layer]):
        self.name = name
        self.width = 1080
        self.height = 1920
        self.duration = 3.0
        self.frame_duration = 1 / 60
        self._layers = layers

    @property
    def num_layers(self) -> int:
        return len(self._layers)

    def layer(self, index: int) -> Layer:
        return self._layers[index - 1]


# Step 2: Implement Source interface
class MemorySource(Source):
    """Source serving compositions built in memory."""

    def __init__(self, compositions: list[Composition]):
        self._compositions = {comp.name: comp for comp in compositions}

    def get_active_composition(self) -> Composition | None:
        return next(iter(self._compositions.values()), None)

    def list_compositions(self) -> list[Composition]:
        return list(self._compositions.values())

    def get_composition(self, name: str) -> Composition:
        if name not in self._compositions:
            raise KeyError(f"Composition not found: {name}")
        return self._compositions[name]

    def get_host_info(self) -> HostInfo:
        return HostInfo(name="Memory Host", version="1.0")


# Step 3: Register with SourceRegistry
def create_memory_source(compositions: list[Composition], **kwargs: Any) -> MemorySource:
    """Factory function for creating MemorySource."""
    return MemorySource(compositions)


# Register the source
SourceRegistry.register_factory('memory', create_memory_source)


# Step 4: Use your source
def main():
    """Example usage of custom source."""
    print("Custom Source Example")
    print("=" * 50)

    story = Composition("Story", [
        Layer(1, "Caption", fade=[(0.0, 0.0), (0.5, 100.0)]),
        Layer(2, "Sticker", fade=[(1.0, 0.0), (1.25, 100.0), (2.5, 0.0)]),
    ])

    # Create pipeline using your source
    pipeline = SourceRegistry.create_pipeline('memory', compositions=[story])

    print("\nExtracting documents...")
    for document in pipeline.extract_documents():
        composition = document['composition']
        print(f"\n✓ Extracted: {composition['name']} @ {composition['frameRate']} fps")
        for layer in composition['layers']:
            summary = layer['animationSummary']
            print(f"  {layer['name']}: {summary['totalKeyframes']} keyframes")

        print(to_json(document, pretty=False)[:200] + "...")


if __name__ == '__main__':
    main()
