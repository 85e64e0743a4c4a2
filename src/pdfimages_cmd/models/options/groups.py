"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

SOURCE_GROUP = Group.create_ordered("Source")
OUTPUT_GROUP = Group.create_ordered("Output")
PAGES_GROUP = Group.create_ordered("Pages")
IMAGES_GROUP = Group.create_ordered("Images")
SECURITY_GROUP = Group.create_ordered("Security")
TOOL_GROUP = Group.create_ordered("Tool")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "IMAGES_GROUP",
    "OUTPUT_GROUP",
    "PAGES_GROUP",
    "RUNTIME_GROUP",
    "SECURITY_GROUP",
    "SOURCE_GROUP",
    "TOOL_GROUP",
]
