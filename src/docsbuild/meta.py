# src/docsbuild/meta.py

"""Centralized program identity constants for docsbuild."""

from dataclasses import dataclass


# --- program identity ---
PROGRAM_PACKAGE = "docsbuild"
PROGRAM_SCRIPT = "docsbuild"
PROGRAM_DISPLAY = "Docsbuild"
PROGRAM_CONFIG = "docsbuild"
PROGRAM_ENV = "DOCSBUILD"
PROGRAM_VERSION = "0.1.0"


@dataclass(frozen=True)
class Metadata:
    """Version information for the running program."""

    version: str = PROGRAM_VERSION

    def __str__(self) -> str:
        return f"{PROGRAM_DISPLAY} {self.version}"
