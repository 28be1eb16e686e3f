"""Routery API: units, simulation."""
