"""Validation of session inputs and resolved parameters."""
