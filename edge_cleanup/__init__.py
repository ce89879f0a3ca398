# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Edge Cleanup - Command-line tool for removing orphaned Lambda@Edge functions

This package provides CLI tools for:
- Finding Lambda@Edge functions no longer attached to any CloudFront distribution
- Resolving each orphaned function to the CloudFormation stack that created it
- Deleting those stacks
"""

__version__ = "1.0.0"
