# IMPORT CONSTRAINT: types/ modules must only import from typing, stdlib, and each other.
"""Typed shapes for the configuration file and Jira REST payloads."""

from __future__ import annotations

from jiracli.types.api import FieldDescriptor, FieldSchema, IssuePayload, SearchResult
from jiracli.types.core import ConfigData, JiraCredentials, LocalKind

__all__ = [
    "ConfigData",
    "FieldDescriptor",
    "FieldSchema",
    "IssuePayload",
    "JiraCredentials",
    "LocalKind",
    "SearchResult",
]
