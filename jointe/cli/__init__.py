"""Command-line interface for jointe."""
