# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Naming conventions linking Lambda@Edge functions to their CloudFormation stacks.

The CDK EdgeFunction construct deploys each edge function from a dedicated
stack in us-east-1 and names both after it:

- function ARN:  arn:aws:lambda:us-east-1:123456789012:function:edge-lambda-stack-ABC123-FnName
- stack ID:      arn:aws:cloudformation:us-east-1:123456789012:stack/edge-lambda-stack-ABC123/<uuid>

Everything here is pure so the convention can be tested without AWS access.
"""

import re
from typing import Iterable, List, Optional

from .models import StackSummary

# Marker present in every edge function ARN created by the CDK EdgeFunction construct
EDGE_FUNCTION_MARKER = "edge-lambda"

# Stack name token embedded in edge function ARNs
STACK_TOKEN_PATTERN = re.compile(r"edge-lambda-stack-\w+", re.ASCII)

# Trailing numeric version qualifier, e.g. ":7"
VERSION_QUALIFIER_PATTERN = re.compile(r":\d+$")


def is_edge_function(function_arn: str) -> bool:
    """Check whether a function ARN follows the edge function naming convention."""
    return EDGE_FUNCTION_MARKER in function_arn


def strip_version_qualifier(function_arn: str) -> str:
    """
    Remove a trailing numeric version qualifier from a function ARN

    Args:
        function_arn: Function ARN, qualified or not

    Returns:
        The unqualified ARN. ARNs without a numeric qualifier are returned as-is.
    """
    return VERSION_QUALIFIER_PATTERN.sub("", function_arn)


def compute_orphans(functions: Iterable[str], attached: Iterable[str]) -> List[str]:
    """
    Find functions that are not referenced by any attachment

    Attachment ARNs are expected to be stripped of version qualifiers already.
    Function ARNs are compared as returned by Lambda.

    Args:
        functions: Edge function ARNs
        attached: Attached function ARNs

    Returns:
        Orphaned function ARNs, in the order of ``functions``
    """
    attached_set = set(attached)
    return [arn for arn in functions if arn not in attached_set]


def extract_stack_token(function_arn: str) -> Optional[str]:
    """Extract the ``edge-lambda-stack-*`` token from a function ARN, if any."""
    match = STACK_TOKEN_PATTERN.search(function_arn)
    if not match:
        return None
    return match.group(0)


def find_stack_for_token(
    token: str, stacks: Iterable[StackSummary]
) -> Optional[StackSummary]:
    """
    Find the first stack whose ID contains the token

    Args:
        token: Stack name token extracted from a function ARN
        stacks: Stack summaries in listing order

    Returns:
        The matching stack, or None if no stack ID contains the token
    """
    for stack in stacks:
        if stack.stack_id and token in stack.stack_id:
            return stack
    return None
