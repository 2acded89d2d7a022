"""Command-line interface for the motion spec extractor.

This module provides the CLI entry point for extracting motion spec
documents from recorded host snapshots.
"""

import argparse
import sys
from pathlib import Path

from .core.serializer import default_output_name, to_json
from .core.types import Document
from .core.validator import collect_warnings, validate_document_with_error_details
from .extractors.context import DEFAULT_MAX_PRECOMP_DEPTH, ExtractionOptions
from .registry import SourceRegistry


def report_progress(current: int, total: int, layer_name: str) -> None:
    """Print extraction progress to stderr."""
    if current == 0:
        print(f"Reading composition ({total} layers)...", file=sys.stderr)
        return
    print(f"  [{current}/{total}] {layer_name}", file=sys.stderr)


def generate_document(
    snapshot_path: Path,
    options: ExtractionOptions,
    composition_name: str | None = None,
) -> Document:
    """Extract a complete motion spec document from a snapshot.

    Args:
        snapshot_path: Snapshot JSON file
        options: Extraction options
        composition_name: Composition to extract (active composition if None)

    Returns:
        Document ready for serialization

    Raises:
        ValueError: If the snapshot is invalid or has no active composition
        KeyError: If the named composition does not exist
    """
    snapshot_path_abs = snapshot_path.resolve()

    print(f"Loading snapshot: {snapshot_path_abs}", file=sys.stderr)
    pipeline = SourceRegistry.create_pipeline('snapshot', path=snapshot_path_abs, options=options)

    document = pipeline.extract_document(composition_name, progress=report_progress)

    layer_count = len(document['composition']['layers'])
    print(f"Extracted {layer_count} layers", file=sys.stderr)

    return document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motion-spec",
        description="Extract a motion spec JSON document from a composition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract the active composition
  motion-spec --snapshot project.snapshot.json

  # Extract a named composition to a file
  motion-spec --snapshot project.snapshot.json --composition "Hero Intro" --output hero.json

  # Visible layers only, without expanding precomps, compact output
  motion-spec --snapshot project.snapshot.json --exclude-hidden --no-precomps --compact
        """,
    )

    parser.add_argument("--snapshot", required=True, help="Recorded host snapshot (JSON)")

    parser.add_argument(
        "--composition", help="Composition to extract (defaults to the active composition)"
    )

    parser.add_argument(
        "--exclude-hidden",
        action="store_true",
        help="Skip layers that are switched off",
    )

    parser.add_argument(
        "--no-precomps",
        action="store_true",
        help="Do not expand nested compositions",
    )

    parser.add_argument(
        "--max-precomp-depth",
        type=int,
        default=DEFAULT_MAX_PRECOMP_DEPTH,
        help=f"Maximum nesting of expanded compositions (default: {DEFAULT_MAX_PRECOMP_DEPTH})",
    )

    parser.add_argument("--compact", action="store_true", help="Write compact JSON")

    parser.add_argument("--output", help="Write the document to this file (or directory) instead of stdout")

    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip schema validation of the extracted document",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the extraction script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate snapshot exists
    path = Path(args.snapshot)
    if not path.exists():
        print(f"Error: Snapshot does not exist: {path}", file=sys.stderr)
        sys.exit(1)

    if args.max_precomp_depth < 0:
        print("Error: --max-precomp-depth must not be negative", file=sys.stderr)
        sys.exit(1)

    options = ExtractionOptions(
        include_hidden=not args.exclude_hidden,
        include_precomps=not args.no_precomps,
        max_precomp_depth=args.max_precomp_depth,
        pretty_print=not args.compact,
    )

    try:
        document = generate_document(path, options, composition_name=args.composition)

        if not args.no_validate:
            print("Validating document against schema...", file=sys.stderr)
            is_valid, error_msg = validate_document_with_error_details(document)

            if not is_valid:
                print("Error: Document validation failed:", file=sys.stderr)
                print(error_msg, file=sys.stderr)
                sys.exit(1)

            for warning in collect_warnings(document):
                print(f"Warning: {warning}", file=sys.stderr)

            print("Validation successful!", file=sys.stderr)

        output = to_json(document, pretty=options.pretty_print)

        if args.output:
            output_path = Path(args.output)
            if output_path.is_dir():
                output_path = output_path / default_output_name(document["composition"]["name"])
            output_path.write_text(output + "\n", encoding="utf-8")
            print(f"Saved: {output_path}", file=sys.stderr)
        else:
            sys.stdout.write(output)
            print()  # Add newline at end

    except Exception as e:
        print(f"Error: Failed to extract document: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
