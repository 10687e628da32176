"""Initialization file for the tests package."""
