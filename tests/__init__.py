"""Tests for the fire dynamics simulation."""
