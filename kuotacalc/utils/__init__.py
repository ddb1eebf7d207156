"""Utility functions for kuota-calc."""
