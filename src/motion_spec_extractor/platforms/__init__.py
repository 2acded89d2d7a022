"""Platform implementations for the extraction pipeline.

This package contains self-contained platform modules that
provide Source implementations for different hosts
(recorded snapshots, live scripting bridges, etc.).

Each platform module auto-registers itself with the SourceRegistry
when imported.
"""

# Platform modules are imported dynamically by SourceRegistry.discover_platforms()
# to handle missing dependencies gracefully
