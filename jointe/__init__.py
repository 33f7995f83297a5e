"""jointe - MIME headers for email attachments."""

__version__ = "0.1.0"
