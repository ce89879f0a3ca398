# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Data model for edge function cleanup.

Defines the CloudFormation stack summary used for stack resolution and the
result of a cleanup run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class StackSummary:
    """A CloudFormation stack as returned by ListStacks."""

    stack_id: str
    stack_name: str
    stack_status: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StackSummary":
        """Create a StackSummary from a ListStacks StackSummaries entry."""
        return cls(
            stack_id=data.get("StackId", ""),
            stack_name=data.get("StackName", ""),
            stack_status=data.get("StackStatus", ""),
        )


@dataclass
class CleanupResult:
    """Counts and outcomes of a single cleanup run."""

    edge_function_count: int = 0
    attached_function_count: int = 0
    orphan_count: int = 0
    deleted_stacks: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def deleted_stack_count(self) -> int:
        return len(self.deleted_stacks)

