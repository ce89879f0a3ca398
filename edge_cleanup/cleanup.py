# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Orphaned Lambda@Edge function cleanup.

Finds edge functions that no CloudFront distribution references and deletes
the CloudFormation stacks that created them.

Behavior:
- Functions and stacks are read from us-east-1, where Lambda@Edge functions live
- Distributions are read from CloudFront (global)
- Any version of a function attached to any cache behavior counts as attached
- Orphans whose stack cannot be resolved are skipped with a warning
- Stack deletion is requested but not awaited
"""

import logging
from typing import Optional

import boto3
from rich.console import Console

from .models import CleanupResult
from .naming import compute_orphans, extract_stack_token, find_stack_for_token
from .providers import DistributionLister, FunctionLister, StackDeleter, StackLister

logger = logging.getLogger(__name__)
console = Console()

# Lambda@Edge functions can only be created in us-east-1
EDGE_REGION = "us-east-1"


class EdgeFunctionCleanup:
    """Delete stacks of Lambda@Edge functions not attached to any distribution."""

    def __init__(
        self,
        profile: Optional[str] = None,
        function_lister: Optional[FunctionLister] = None,
        distribution_lister: Optional[DistributionLister] = None,
        stack_lister: Optional[StackLister] = None,
        stack_deleter: Optional[StackDeleter] = None,
    ):
        """Initialize cleanup with AWS clients.

        Collaborators that are not supplied are built from a boto3 session.

        Args:
            profile: AWS profile name (optional)
            function_lister: Lists edge function ARNs
            distribution_lister: Lists function ARNs attached to distributions
            stack_lister: Lists CloudFormation stacks
            stack_deleter: Requests stack deletion
        """
        if None in (function_lister, distribution_lister, stack_lister, stack_deleter):
            session = (
                boto3.Session(profile_name=profile) if profile else boto3.Session()
            )
            cfn = session.client("cloudformation", region_name=EDGE_REGION)
            function_lister = function_lister or FunctionLister(
                session.client("lambda", region_name=EDGE_REGION)
            )
            distribution_lister = distribution_lister or DistributionLister(
                session.client("cloudfront")
            )
            stack_lister = stack_lister or StackLister(cfn)
            stack_deleter = stack_deleter or StackDeleter(cfn)

        self.function_lister = function_lister
        self.distribution_lister = distribution_lister
        self.stack_lister = stack_lister
        self.stack_deleter = stack_deleter

    def _warn(self, result: CleanupResult, message: str) -> None:
        logger.debug(f"Skipped orphan: {message}")
        console.print(f"[yellow]{message}[/yellow]")
        result.warnings.append(message)

    def run(self) -> CleanupResult:
        """Find orphaned edge functions and delete their stacks.

        Errors raised by any AWS call abort the run.

        Returns:
            CleanupResult with counts, deleted stack names and warnings
        """
        result = CleanupResult()

        edge_functions = self.function_lister.list_edge_functions()
        result.edge_function_count = len(edge_functions)
        console.print(f"Found {len(edge_functions)} edge functions.")

        attached_functions = self.distribution_lister.list_attached_functions()
        result.attached_function_count = len(attached_functions)
        console.print(f"Found {len(attached_functions)} attached functions.")

        orphans = compute_orphans(edge_functions, attached_functions)
        result.orphan_count = len(orphans)
        console.print(f"Calculated {len(orphans)} unattached functions.")

        stacks = self.stack_lister.list_stacks()

        for function_arn in orphans:
            token = extract_stack_token(function_arn)
            if not token:
                self._warn(result, f"Could not resolve stack ID from {function_arn}.")
                continue

            stack = find_stack_for_token(token, stacks)
            if not stack:
                self._warn(
                    result,
                    f"Could not resolve stack for {function_arn} (stack ID search {token}).",
                )
                continue

            self.stack_deleter.delete_stack(stack.stack_name)
            result.deleted_stacks.append(stack.stack_name)

        console.print(
            f"Deleted {result.deleted_stack_count} stacks with unattached edge functions."
        )
        return result
