"""Basic snapshot extraction example.

This example demonstrates how to:
- Load a recorded host snapshot
- Extract the active composition
- Display the animation summary of each layer
- Save the document to a JSON file
"""

import sys
from pathlib import Path

from motion_spec_extractor import SourceRegistry, collect_warnings, default_output_name, to_json
from motion_spec_extractor.extractors import ExtractionOptions


def main():
    snapshot_path = Path(__file__).parent / "sample.snapshot.json"

    if not snapshot_path.exists():
        print(f"Snapshot not found: {snapshot_path}", file=sys.stderr)
        return

    print(f"Loading snapshot: {snapshot_path}", file=sys.stderr)

    # Create pipeline
    options = ExtractionOptions(include_hidden=False, max_precomp_depth=3)
    pipeline = SourceRegistry.create_pipeline('snapshot', path=snapshot_path, options=options)

    document = pipeline.extract_document()
    composition = document['composition']

    # Display summary
    print(f"\n✓ Extracted {composition['name']}", file=sys.stderr)
    print(f"  {composition['width']}x{composition['height']} @ {composition['frameRate']} fps", file=sys.stderr)

    for layer in composition['layers']:
        summary = layer['animationSummary']
        print(f"  [{layer['index']}] {layer['name']} ({layer['type']})", file=sys.stderr)
        for prop in summary['properties']:
            easing = prop['easing']['css'] if prop['easing'] else 'linear'
            print(
                f"      {prop['name']}: {prop['startValue']} -> {prop['endValue']} "
                f"over {prop['duration']:.2f}s, delay {prop['delay']:.2f}s, {easing}",
                file=sys.stderr,
            )

    for warning in collect_warnings(document):
        print(f"  Warning: {warning}", file=sys.stderr)

    # Save to file
    output_file = Path(default_output_name(composition['name']))
    output_file.write_text(to_json(document) + "\n", encoding="utf-8")

    print(f"\nDocument saved to {output_file}", file=sys.stderr)


if __name__ == '__main__':
    main()
