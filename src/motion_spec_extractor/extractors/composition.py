"""Composition extraction: settings, markers and the layer stack."""

from collections.abc import Callable
from dataclasses import replace
from typing import Any

from ..core.types import Composition, Layer, Marker
from ..core.values import is_finite_number, trim_color
from ..core.walker import try_attr, try_call
from .context import ExtractionContext
from .layers import extract_layer

# progress(current, total, layer_name)
ProgressCallback = Callable[[int, int, str], None]
# on_layer_error(layer_index, layer_name, exception)
LayerErrorHandler = Callable[[int, str, Exception], None]


def read_frame_rate(comp: Any) -> float | None:
    """Frame rate as 1 / frame duration, rounded to 2 decimals."""
    frame_duration = try_attr(comp, "frame_duration")
    if not is_finite_number(frame_duration) or frame_duration <= 0:
        return None
    return round(1.0 / frame_duration, 2)


def extract_markers(comp: Any) -> list[Marker]:
    """Extract composition markers in host order.

    Markers whose time cannot be read are skipped.
    """
    marker_property = try_attr(comp, "marker_property")
    num_keys = try_attr(marker_property, "num_keys")
    if not isinstance(num_keys, int) or isinstance(num_keys, bool):
        return []

    markers: list[Marker] = []
    for index in range(1, num_keys + 1):
        time = try_call(try_attr(marker_property, "key_time"), index)
        if not is_finite_number(time):
            continue
        value = try_call(try_attr(marker_property, "key_value"), index)
        duration = try_attr(value, "duration")
        comment = try_attr(value, "comment")
        markers.append(
            Marker(
                time=time,
                duration=duration if is_finite_number(duration) else None,
                comment=comment if isinstance(comment, str) else None,
            )
        )
    return markers


def _int_or_none(value: Any) -> int | None:
    if isinstance(value, bool) or not is_finite_number(value):
        return None
    return int(value)


def extract_composition(
    comp: Any,
    context: ExtractionContext,
    progress: ProgressCallback | None = None,
    on_layer_error: LayerErrorHandler | None = None,
    nested: bool = False,
) -> Composition:
    """Extract a composition and every layer in it.

    Args:
        comp: Host composition
        context: Context of the caller; the composition's own frame rate
            replaces the context frame rate for its layers
        progress: Optional callback, invoked once before the composition
            settings are read and then before each layer
        on_layer_error: Optional handler for exceptions escaping a layer
            extractor. When given, the failing layer is skipped; otherwise
            the exception propagates.
        nested: Whether this composition is the source of a precomp layer

    Returns:
        Composition with layers in host stacking order
    """
    num_layers = _int_or_none(try_attr(comp, "num_layers")) or 0
    if progress:
        progress(0, num_layers, "")

    frame_rate = read_frame_rate(comp)
    effective_rate = frame_rate if frame_rate is not None else context.frame_rate
    if nested:
        layer_context = context.for_nested(effective_rate)
    else:
        layer_context = replace(context, frame_rate=effective_rate)

    duration = try_attr(comp, "duration")
    result = Composition(
        name=try_attr(comp, "name"),
        width=_int_or_none(try_attr(comp, "width")),
        height=_int_or_none(try_attr(comp, "height")),
        frameRate=frame_rate,
        duration=duration if is_finite_number(duration) else None,
        backgroundColor=trim_color(try_attr(comp, "bg_color")),
        markers=extract_markers(comp),
        layers=[],
    )

    layers: list[Layer] = []

    for index in range(1, num_layers + 1):
        layer = try_call(try_attr(comp, "layer"), index)
        if layer is None:
            continue

        name = try_attr(layer, "name")
        layer_name = name if isinstance(name, str) else f"Layer {index}"

        # Hidden layers are the ones switched off in the host
        if not context.options.include_hidden and try_attr(layer, "enabled") is False:
            continue

        if progress:
            progress(index, num_layers, layer_name)

        if on_layer_error is None:
            layers.append(extract_layer(layer, layer_context))
            continue

        try:
            layers.append(extract_layer(layer, layer_context))
        except Exception as e:
            on_layer_error(index, layer_name, e)

    result["layers"] = layers
    return result
