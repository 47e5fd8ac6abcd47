"""Yavin: an AI learning platform backend."""
