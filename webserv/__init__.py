"""An event-loop HTTP server with virtual-host and per-path location configuration."""

__version__ = "1.0.0"