"""Illustrative target types and factories."""
