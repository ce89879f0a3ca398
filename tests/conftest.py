# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Test configuration and fixtures for edge_cleanup tests
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Make the package importable when tests run from a source checkout
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake credentials so moto never reaches real AWS"""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def fake_collaborators():
    """Mock listers and deleter with empty defaults"""
    function_lister = MagicMock()
    function_lister.list_edge_functions.return_value = []

    distribution_lister = MagicMock()
    distribution_lister.list_attached_functions.return_value = []

    stack_lister = MagicMock()
    stack_lister.list_stacks.return_value = []

    stack_deleter = MagicMock()

    return {
        "function_lister": function_lister,
        "distribution_lister": distribution_lister,
        "stack_lister": stack_lister,
        "stack_deleter": stack_deleter,
    }

