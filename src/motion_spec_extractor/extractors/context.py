"""Options and per-pass context threaded through every extractor."""

from dataclasses import dataclass, field, replace

DEFAULT_FRAME_RATE = 30.0
DEFAULT_MAX_PRECOMP_DEPTH = 5


@dataclass(frozen=True)
class ExtractionOptions:
    """User-facing extraction settings.

    Attributes:
        include_hidden: Extract disabled layers too
        include_precomps: Expand nested compositions into precomp layers
        max_precomp_depth: Maximum nesting of expanded compositions
        pretty_print: Indent the serialized JSON (no effect on content)
    """

    include_hidden: bool = True
    include_precomps: bool = True
    max_precomp_depth: int = DEFAULT_MAX_PRECOMP_DEPTH
    pretty_print: bool = True


@dataclass(frozen=True)
class ExtractionContext:
    """Immutable state for one extraction pass.

    Attributes:
        frame_rate: Frame rate of the composition being extracted
        options: Extraction options
        precomp_depth: Nesting level of the composition being extracted
    """

    frame_rate: float = DEFAULT_FRAME_RATE
    options: ExtractionOptions = field(default_factory=ExtractionOptions)
    precomp_depth: int = 0

    def for_nested(self, frame_rate: float) -> "ExtractionContext":
        """Context for a composition nested one level deeper."""
        return replace(self, frame_rate=frame_rate, precomp_depth=self.precomp_depth + 1)

    @property
    def can_expand_precomps(self) -> bool:
        return self.options.include_precomps and self.precomp_depth < self.options.max_precomp_depth
