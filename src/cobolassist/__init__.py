"""cobol-assist: declaration completion and documentation for COBOL sources."""

__version__ = "0.1.0"
