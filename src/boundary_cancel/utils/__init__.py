"""Shared utilities for boundary-cancel."""
