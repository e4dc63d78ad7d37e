"""Cleanup engine: detection, privileges, execution and reporting."""
