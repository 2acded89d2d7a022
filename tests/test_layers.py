"""Tests for layer type detection, layer extraction and animation summaries."""

from unittest.mock import Mock

import pytest

from motion_spec_extractor.extractors.context import ExtractionContext, ExtractionOptions
from motion_spec_extractor.extractors.layers import detect_layer_type, extract_layer, is_image_file
from motion_spec_extractor.extractors.summary import compute_animation_summary
from motion_spec_extractor.platforms.snapshot import SnapshotSource

CONTEXT = ExtractionContext(frame_rate=30.0)
EASY = [{"speed": 0, "influence": 33.33}]

PAYLOAD_KEYS = (
    "shapeData",
    "textData",
    "precompData",
    "solidData",
    "footageData",
    "cameraData",
    "lightData",
)


# ============================================================================
# Snapshot Builders
# ============================================================================

def build_source(layers: list[dict], extra_compositions: list[dict] | None = None) -> SnapshotSource:
    comps = [{"name": "Main", "frameRate": 30, "layers": layers}]
    comps.extend(extra_compositions or [])
    return SnapshotSource.from_dict({"activeComposition": "Main", "compositions": comps})


def make_layer(**layer_data):
    layer_data.setdefault("name", "Layer")
    return build_source([layer_data]).get_composition("Main").layer(1)


def footage(type_name: str, **extra) -> dict:
    main_source = {"typeName": type_name}
    main_source.update(extra)
    return {"name": "Item", "width": 1920, "height": 1080, "mainSource": main_source}


def animated(match_name: str, *values, times=None) -> dict:
    times = times or [float(i) for i in range(len(values))]
    return {
        "name": match_name.replace("ADBE ", ""),
        "matchName": match_name,
        "valueType": "ONE_D",
        "keyframes": [
            {
                "time": time,
                "value": value,
                "inInterpolation": "BEZIER",
                "outInterpolation": "BEZIER",
                "inEase": EASY,
                "outEase": EASY,
            }
            for time, value in zip(times, values)
        ],
    }


def static(match_name: str, value, value_type: str = "ONE_D") -> dict:
    return {"name": match_name, "matchName": match_name, "valueType": value_type, "value": value}


def transform(*children) -> dict:
    return {"name": "Transform", "matchName": "ADBE Transform Group", "properties": list(children)}


# ============================================================================
# Layer Type Detection
# ============================================================================

class TestDetectLayerType:
    """Test structural layer type detection."""

    @pytest.mark.parametrize(
        "match_name,expected",
        [
            ("ADBE Vector Layer", "shape"),
            ("ADBE Text Layer", "text"),
            ("ADBE Camera Layer", "camera"),
            ("ADBE Light Layer", "light"),
        ],
    )
    def test_match_names(self, match_name, expected) -> None:
        assert detect_layer_type(make_layer(matchName=match_name)) == expected

    def test_adjustment_beats_source(self) -> None:
        layer = make_layer(matchName="ADBE AV Layer", adjustmentLayer=True, source=footage("Solid"))

        assert detect_layer_type(layer) == "adjustment"

    def test_null_layer(self) -> None:
        layer = make_layer(matchName="ADBE AV Layer", nullLayer=True, source=footage("Solid"))

        assert detect_layer_type(layer) == "null"

    def test_no_source_is_null(self) -> None:
        assert detect_layer_type(make_layer(matchName="ADBE AV Layer")) == "null"

    def test_precomp(self) -> None:
        source = build_source(
            [{"name": "Nested", "source": {"composition": "Inner"}}],
            [{"name": "Inner", "layers": []}],
        )

        assert detect_layer_type(source.get_composition("Main").layer(1)) == "precomp"

    def test_solid(self) -> None:
        assert detect_layer_type(make_layer(source=footage("Solid", color=[1, 0, 0]))) == "solid"

    def test_image_and_video(self) -> None:
        image = make_layer(source=footage("File", file={"name": "logo.PNG", "fsName": "/a/logo.PNG"}))
        video = make_layer(source=footage("File", file={"name": "clip.mov", "fsName": "/a/clip.mov"}))

        assert detect_layer_type(image) == "image"
        assert detect_layer_type(video) == "video"

    def test_missing_file_is_solid(self) -> None:
        layer = make_layer(source=footage("File", file={"name": "gone.mov", "exists": False}))

        assert detect_layer_type(layer) == "solid"

    def test_unreadable_layer_is_null(self) -> None:
        layer = Mock(spec=[])

        assert detect_layer_type(layer) == "null"

    def test_is_image_file(self) -> None:
        assert is_image_file("plate.exr")
        assert is_image_file("UI.Svg")
        assert not is_image_file("clip.mp4")
        assert not is_image_file("noextension")


# ============================================================================
# Layer Extraction
# ============================================================================

class TestExtractLayer:
    """Test the full layer descriptor."""

    def test_identity_timing_and_flags(self) -> None:
        source = build_source([
            {"name": "Parent", "matchName": "ADBE AV Layer", "nullLayer": True},
            {
                "name": "Child",
                "matchName": "ADBE AV Layer",
                "inPoint": 0.5,
                "outPoint": 4.0,
                "startTime": 0.0,
                "stretch": 100,
                "enabled": True,
                "solo": False,
                "shy": False,
                "locked": True,
                "blendingMode": "BlendingMode.SCREEN",
                "threeDLayer": True,
                "parent": 1,
                "trackMatteType": "TrackMatteType.ALPHA",
                "trackMatteLayer": 1,
                "source": footage("Solid", color=[0.2, 0.4, 0.6, 1]),
            },
        ])
        layer = extract_layer(source.get_composition("Main").layer(2), CONTEXT)

        assert layer["index"] == 2
        assert layer["name"] == "Child"
        assert layer["type"] == "solid"
        assert layer["inPoint"] == 0.5
        assert layer["outPoint"] == 4.0
        assert layer["locked"] is True
        assert layer["blendMode"] == "SCREEN"
        assert layer["is3D"] is True
        assert layer["parentIndex"] == 1
        assert layer["trackMatteType"] == "ALPHA"
        assert layer["trackMatteLayer"] == 1

    def test_unreadable_fields_are_none(self) -> None:
        layer = extract_layer(make_layer(matchName="ADBE AV Layer"), CONTEXT)

        assert layer["inPoint"] is None
        assert layer["solo"] is None
        assert layer["blendMode"] is None
        assert layer["is3D"] is False
        assert layer["parentIndex"] is None
        assert layer["masks"] == []
        assert layer["effects"] == []

    @pytest.mark.parametrize(
        "layer_data,payload",
        [
            ({"matchName": "ADBE Vector Layer"}, "shapeData"),
            ({"matchName": "ADBE Text Layer"}, "textData"),
            ({"matchName": "ADBE Camera Layer"}, "cameraData"),
            ({"matchName": "ADBE Light Layer"}, "lightData"),
            ({"source": footage("Solid", color=[1, 1, 1])}, "solidData"),
            ({"source": footage("File", file={"name": "a.png"})}, "footageData"),
            ({"source": footage("File", file={"name": "a.mp4"})}, "footageData"),
        ],
    )
    def test_exactly_one_matching_payload(self, layer_data, payload) -> None:
        """Test that a layer carries only the payload of its type."""
        layer = extract_layer(make_layer(**layer_data), CONTEXT)

        present = [key for key in PAYLOAD_KEYS if key in layer]
        assert present == [payload]

    def test_text_layer_without_text_properties(self) -> None:
        """Test that a text layer missing its text group still gets an object payload."""
        layer = extract_layer(make_layer(matchName="ADBE Text Layer"), CONTEXT)

        assert layer["type"] == "text"
        assert layer["textData"] == {}

    @pytest.mark.parametrize(
        "layer_data",
        [{"matchName": "ADBE AV Layer"}, {"adjustmentLayer": True}],
    )
    def test_null_and_adjustment_have_no_payload(self, layer_data) -> None:
        layer = extract_layer(make_layer(**layer_data), CONTEXT)

        assert not [key for key in PAYLOAD_KEYS if key in layer]

    def test_solid_payload(self) -> None:
        layer = extract_layer(make_layer(source=footage("Solid", color=[0.2, 0.4, 0.6, 1])), CONTEXT)

        assert layer["solidData"] == {"color": [0.2, 0.4, 0.6], "width": 1920, "height": 1080}

    def test_footage_payload(self) -> None:
        layer = extract_layer(
            make_layer(source=footage("File", file={"name": "clip.mov", "fsName": "/media/clip.mov"})),
            CONTEXT,
        )

        assert layer["type"] == "video"
        assert layer["footageData"] == {"sourceFile": "/media/clip.mov", "sourceFileName": "clip.mov"}

    def test_camera_payload(self) -> None:
        layer = extract_layer(make_layer(matchName="ADBE Camera Layer", properties=[{
            "name": "Camera Options",
            "matchName": "ADBE Camera Options Group",
            "properties": [
                static("ADBE Camera Zoom", 1777.8),
                static("ADBE Camera Depth of Field", 1),
                static("ADBE Camera Focus Distance", 1500),
                static("ADBE Camera Aperture", 25),
            ],
        }]), CONTEXT)

        camera = layer["cameraData"]
        assert camera["zoom"]["staticValue"] == 1777.8
        assert camera["depthOfField"] is True
        assert camera["focusDistance"]["staticValue"] == 1500
        assert "blurLevel" not in camera

    def test_light_payload(self) -> None:
        layer = extract_layer(make_layer(matchName="ADBE Light Layer", properties=[{
            "name": "Light Options",
            "matchName": "ADBE Light Options Group",
            "properties": [
                static("ADBE Light Type", "LightType.SPOT"),
                static("ADBE Light Intensity", 100),
                static("ADBE Light Color", [1, 0.9, 0.8, 1], "COLOR"),
                static("ADBE Light Cone Angle", 90),
            ],
        }]), CONTEXT)

        light = layer["lightData"]
        assert light["lightType"] == "SPOT"
        assert light["color"]["staticValue"] == [1.0, 0.9, 0.8]
        assert light["coneAngle"]["staticValue"] == 90
        assert "shadowDarkness" not in light

    def test_camera_payload_present_when_unreadable(self) -> None:
        """Test that a failing payload still yields a payload with None fields."""
        layer = extract_layer(make_layer(matchName="ADBE Camera Layer"), CONTEXT)

        assert layer["cameraData"] == {"zoom": None, "depthOfField": None}


class TestPrecompExpansion:
    """Test nested composition handling."""

    def _source(self) -> SnapshotSource:
        return build_source(
            [{
                "name": "Nested",
                "source": {"composition": "Inner"},
                "timeRemapEnabled": True,
                "properties": [animated("ADBE Time Remapping", 0.0, 2.0)],
            }],
            [{
                "name": "Inner",
                "width": 500,
                "height": 500,
                "duration": 2.0,
                "frameRate": 24,
                "layers": [{"name": "Dot", "matchName": "ADBE Vector Layer"}],
            }],
        )

    def test_expands_nested_composition(self) -> None:
        layer = extract_layer(self._source().get_composition("Main").layer(1), CONTEXT)

        precomp = layer["precompData"]
        assert precomp["compositionName"] == "Inner"
        assert precomp["composition"]["frameRate"] == 24
        assert precomp["composition"]["layers"][0]["type"] == "shape"
        assert precomp["timeRemap"]["isAnimated"] is True

    def test_nested_keyframes_use_nested_frame_rate(self) -> None:
        source = build_source(
            [{"name": "Nested", "source": {"composition": "Inner"}}],
            [{
                "name": "Inner",
                "frameRate": 24,
                "layers": [{"name": "Fade", "properties": [transform(animated("ADBE Opacity", 0, 100))]}],
            }],
        )

        layer = extract_layer(source.get_composition("Main").layer(1), CONTEXT)

        inner = layer["precompData"]["composition"]["layers"][0]
        assert [k["frame"] for k in inner["transform"]["opacity"]["keyframes"]] == [0, 24]

    def test_precomps_disabled(self) -> None:
        context = ExtractionContext(options=ExtractionOptions(include_precomps=False))

        layer = extract_layer(self._source().get_composition("Main").layer(1), context)

        assert layer["precompData"]["compositionName"] == "Inner"
        assert "composition" not in layer["precompData"]

    def test_depth_limit_stops_self_nesting(self) -> None:
        """Test that a composition containing itself is expanded a bounded number of times."""
        source = SnapshotSource.from_dict({"compositions": [
            {"name": "Loop", "frameRate": 30, "layers": [{"name": "Self", "source": {"composition": "Loop"}}]},
        ]})
        context = ExtractionContext(options=ExtractionOptions(max_precomp_depth=2))

        layer = extract_layer(source.get_composition("Loop").layer(1), context)

        depth = 0
        precomp = layer["precompData"]
        while "composition" in precomp:
            depth += 1
            precomp = precomp["composition"]["layers"][0]["precompData"]
        assert depth == 2


# ============================================================================
# Animation Summary
# ============================================================================

class TestAnimationSummary:
    """Test the transform animation digest."""

    def test_summarizes_animated_transform(self) -> None:
        layer = extract_layer(make_layer(properties=[transform(
            animated("ADBE Opacity", 0, 100, times=[0.5, 1.5]),
            static("ADBE Scale", [100, 100], "TWO_D"),
        )]), CONTEXT)

        summary = layer["animationSummary"]
        assert summary["isAnimated"] is True
        assert summary["animatedPropertyCount"] == 1
        assert summary["totalKeyframes"] == 2

        opacity = summary["properties"][0]
        assert opacity["startValue"] == 0
        assert opacity["endValue"] == 100
        assert opacity["delay"] == 0.5
        assert opacity["duration"] == 1.0
        assert opacity["easing"]["css"] == "cubic-bezier(0.3333, 0, 0.6667, 1)"

    def test_single_keyframe_is_not_animation(self) -> None:
        layer = extract_layer(make_layer(properties=[transform(animated("ADBE Opacity", 50))]), CONTEXT)

        assert layer["transform"]["opacity"]["isAnimated"] is True
        assert layer["animationSummary"]["isAnimated"] is False
        assert layer["animationSummary"]["properties"] == []

    def test_includes_separated_position(self) -> None:
        layer_data = {
            "transform": {
                "positionSeparated": {
                    "x": {"name": "X Position", "isAnimated": True, "keyframes": [
                        {"index": 1, "time": 0.0, "value": 0, "temporalEasing": None},
                        {"index": 2, "time": 2.0, "value": 10, "temporalEasing": None},
                    ]},
                },
            },
        }

        summary = compute_animation_summary(layer_data)

        assert summary["animatedPropertyCount"] == 1
        assert summary["properties"][0]["name"] == "X Position"
        assert summary["properties"][0]["easing"] is None

    def test_empty_layer(self) -> None:
        assert compute_animation_summary({}) == {
            "isAnimated": False,
            "animatedPropertyCount": 0,
            "totalKeyframes": 0,
            "properties": [],
        }
