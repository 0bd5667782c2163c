"""Command line interface for vips_tools."""
