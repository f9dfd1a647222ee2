"""Command-line interface for srcfilter."""
