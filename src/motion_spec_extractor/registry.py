"""Source registry for factory-based pipeline creation.

Hosts are reached through sources. Each platform package registers a
source factory under a short name ('snapshot', ...) when it is imported,
and ``SourceRegistry.create_pipeline`` turns that name plus the source's
arguments into a ready ExtractionPipeline.

Platforms whose host bindings cannot be imported are remembered together
with the import error, so that asking for them explains what is missing
instead of reporting an unknown name.
"""

import importlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .pipeline import ExtractionPipeline
    from .sources.base import Source


class SourceRegistry:
    """Central registry of source factories and platform availability."""

    _factories: dict[str, Callable[..., "Source"]] = {}
    # Platform name -> reason it could not be imported
    _unavailable: dict[str, str] = {}

    @classmethod
    def register_factory(cls, name: str, factory: Callable[..., "Source"]) -> None:
        """Register a factory function for creating sources.

        Registering a name again replaces the earlier factory, and clears
        any failure recorded for a platform of the same name.

        Args:
            name: Name of the source (e.g., 'snapshot')
            factory: Callable returning a Source for the given keyword arguments

        Example:
            >>> SourceRegistry.register_factory('snapshot', create_snapshot_source)
        """
        cls._factories[name] = factory
        cls._unavailable.pop(name, None)

    @classmethod
    def create_pipeline(cls, source_name: str, options: Any = None, **source_args: Any) -> "ExtractionPipeline":
        """Create a pipeline reading from a registered source.

        Args:
            source_name: Name of the registered source
            options: ExtractionOptions for the pipeline, or None for defaults
            **source_args: Arguments passed to the source factory

        Returns:
            ExtractionPipeline configured with the requested source and options

        Raises:
            ValueError: If source_name is not registered or its platform
                failed to import
            TypeError: If options is not an ExtractionOptions

        Example:
            >>> pipeline = SourceRegistry.create_pipeline(
            ...     'snapshot',
            ...     path=Path('scene.snapshot.json'),
            ...     options=ExtractionOptions(include_hidden=False),
            ... )
        """
        # Import here to avoid circular dependency
        from .extractors.context import ExtractionOptions
        from .pipeline import ExtractionPipeline

        if source_name not in cls._factories:
            if source_name in cls._unavailable:
                raise ValueError(
                    f"Source '{source_name}' is unavailable: {cls._unavailable[source_name]}"
                )
            available = ', '.join(cls._factories.keys()) or 'none'
            raise ValueError(
                f"Unknown source: '{source_name}'. Available sources: {available}"
            )

        if options is not None and not isinstance(options, ExtractionOptions):
            raise TypeError(
                f"options must be ExtractionOptions, got {type(options).__name__}"
            )

        source = cls._factories[source_name](**source_args)

        return ExtractionPipeline(source, options)

    @classmethod
    def list_sources(cls) -> list[str]:
        """List all registered source names."""
        return list(cls._factories.keys())

    @classmethod
    def list_unavailable_platforms(cls) -> dict[str, str]:
        """Map each platform that failed to import to the reason."""
        return dict(cls._unavailable)

    @classmethod
    def discover_platforms(cls) -> None:
        """Import every package under platforms/ so that it registers itself.

        A platform whose dependencies are missing is recorded as unavailable
        and reported on stderr; discovery continues with the others.
        """
        platforms_dir = Path(__file__).parent / 'platforms'

        if not platforms_dir.exists():
            return

        for platform_path in sorted(platforms_dir.iterdir()):
            if not platform_path.is_dir():
                continue

            if not (platform_path / '__init__.py').exists():
                continue

            name = platform_path.name
            try:
                importlib.import_module(f'.platforms.{name}', package=__package__)
            except ImportError as e:
                cls._unavailable[name] = str(e)
                print(f"Warning: Platform '{name}' unavailable: {e}", file=sys.stderr)
