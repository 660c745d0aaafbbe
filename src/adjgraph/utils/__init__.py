"""Utility helpers for adjgraph."""
