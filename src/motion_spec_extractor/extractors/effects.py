"""Effect extraction.

Effect parameters can sit inside nested parameter groups, so each effect is
walked with the generic property walker rather than read one level deep.
"""

from typing import Any

from ..core.types import AnimatedProperty, EffectData
from ..core.values import read_value_type
from ..core.walker import iter_children, try_attr, try_property, walk_property_group
from .context import ExtractionContext
from .keyframes import extract_animated_property
from .shapes import SKIPPED_VALUE_TYPES

EFFECT_PARADE = "ADBE Effect Parade"


def extract_effect_properties(effect: Any, context: ExtractionContext) -> list[AnimatedProperty]:
    """Extract every value-bearing parameter of an effect, at any depth."""
    properties: list[AnimatedProperty] = []

    def collect(prop: Any, depth: int) -> None:
        value_type = read_value_type(prop)
        if value_type is None or value_type in SKIPPED_VALUE_TYPES:
            return
        extracted = extract_animated_property(prop, context)
        if extracted is not None:
            properties.append(extracted)

    walk_property_group(effect, collect)
    return properties


def extract_effects(layer: Any, context: ExtractionContext) -> list[EffectData]:
    """Extract all effects applied to a layer.

    Args:
        layer: Host layer
        context: Extraction context

    Returns:
        One EffectData per readable effect, in host order
    """
    parade = try_property(layer, EFFECT_PARADE)
    effects: list[EffectData] = []

    for _, effect in iter_children(parade):
        effects.append(
            EffectData(
                name=try_attr(effect, "name"),
                matchName=try_attr(effect, "match_name"),
                enabled=try_attr(effect, "enabled"),
                properties=extract_effect_properties(effect, context),
            )
        )

    return effects
