"""Registrar: course catalogue and enrollment services."""
