"""Schulkonfiguration: Schema, Standardwerte und YAML-Verwaltung."""
