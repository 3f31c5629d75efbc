"""
Base Pydantic models for create-gaarf-wf.

Provides common configuration and base classes for all models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WorkflowBaseModel(BaseModel):
    """Base model for all create-gaarf-wf Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(WorkflowBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
