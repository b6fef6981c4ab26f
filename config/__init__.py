"""Konfiguration: Schema (Pydantic), Defaults und YAML-Manager."""
