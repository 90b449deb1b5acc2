"""Tests for the pawnsboard package."""
