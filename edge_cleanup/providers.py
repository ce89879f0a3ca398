# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
AWS listing and deletion collaborators for edge function cleanup.

Each class wraps a single boto3 client and exposes one listing or deletion
operation. Listings walk every page of the provider's paginator and return
fully materialized lists. API errors are not caught.
"""

import logging
from typing import List

from .models import StackSummary
from .naming import is_edge_function, strip_version_qualifier

logger = logging.getLogger(__name__)


class FunctionLister:
    """List Lambda@Edge function ARNs."""

    def __init__(self, lambda_client):
        self.lambda_client = lambda_client

    def list_edge_functions(self) -> List[str]:
        """
        List ARNs of all edge functions in the client's region

        A page without a Functions key ends the listing.

        Returns:
            Edge function ARNs in listing order
        """
        edge_functions = []
        page_count = 0

        paginator = self.lambda_client.get_paginator("list_functions")
        for page in paginator.paginate():
            page_count += 1

            functions = page.get("Functions")
            if functions is None:
                break

            for function in functions:
                function_arn = function.get("FunctionArn")
                if not function_arn:
                    continue
                if not is_edge_function(function_arn):
                    continue
                edge_functions.append(function_arn)

        logger.debug(
            f"Listed {len(edge_functions)} edge functions from {page_count} pages"
        )
        return edge_functions


class DistributionLister:
    """List Lambda function ARNs attached to CloudFront distributions."""

    def __init__(self, cloudfront_client):
        self.cloudfront = cloudfront_client

    def list_attached_functions(self) -> List[str]:
        """
        List ARNs of all functions associated with any cache behavior

        Version qualifiers are stripped, so every version of a function counts
        as the same attachment. The result may contain duplicates. A page
        without DistributionList.Items ends the listing.

        Returns:
            Attached function ARNs without version qualifiers
        """
        attached_functions = []
        page_count = 0

        paginator = self.cloudfront.get_paginator("list_distributions")
        for page in paginator.paginate():
            page_count += 1

            distributions = page.get("DistributionList", {}).get("Items")
            if distributions is None:
                break

            for distribution in distributions:
                attached_functions.extend(self._attached_to_distribution(distribution))

        logger.debug(
            f"Listed {len(attached_functions)} function associations from {page_count} pages"
        )
        return attached_functions

    @staticmethod
    def _attached_to_distribution(distribution: dict) -> List[str]:
        """Collect function associations from the default and additional cache behaviors."""
        cache_behaviors = []
        if distribution.get("DefaultCacheBehavior"):
            cache_behaviors.append(distribution["DefaultCacheBehavior"])
        cache_behaviors.extend(distribution.get("CacheBehaviors", {}).get("Items") or [])

        attached = []
        for cache_behavior in cache_behaviors:
            associations = cache_behavior.get("LambdaFunctionAssociations", {}).get(
                "Items"
            )
            if not associations:
                continue
            for association in associations:
                function_arn = association.get("LambdaFunctionARN")
                if function_arn:
                    attached.append(strip_version_qualifier(function_arn))
        return attached


class StackLister:
    """List CloudFormation stack summaries."""

    def __init__(self, cfn_client):
        self.cfn = cfn_client

    def list_stacks(self) -> List[StackSummary]:
        """
        List all stack summaries in the client's region

        No status filter is applied, so the listing includes whatever
        ListStacks returns by default (recently deleted stacks included).

        Returns:
            Stack summaries in listing order
        """
        stacks = []

        paginator = self.cfn.get_paginator("list_stacks")
        for page in paginator.paginate():
            for summary in page.get("StackSummaries", []):
                stacks.append(StackSummary.from_dict(summary))

        logger.debug(f"Listed {len(stacks)} stacks")
        return stacks


class StackDeleter:
    """Request CloudFormation stack deletion."""

    def __init__(self, cfn_client):
        self.cfn = cfn_client

    def delete_stack(self, stack_name: str) -> None:
        """
        Request deletion of a stack

        Returns once CloudFormation accepts the request. Teardown continues
        asynchronously and is not awaited.
        """
        logger.info(f"Requesting deletion of stack: {stack_name}")
        self.cfn.delete_stack(StackName=stack_name)
