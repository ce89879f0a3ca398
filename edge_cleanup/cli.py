# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

"""
Edge Cleanup CLI - Main Command Line Interface

Command-line tool for removing orphaned Lambda@Edge functions.
"""

import logging
import sys
from typing import Optional

import click
from rich.console import Console

from . import __version__, display
from .cleanup import EDGE_REGION, EdgeFunctionCleanup

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--profile", help="AWS profile to use (default: default credential chain)")
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (default: INFO)",
)
@click.pass_context
def cli(ctx: click.Context, profile: Optional[str], log_level: str):
    """
    Edge Cleanup - Remove orphaned Lambda@Edge functions

    This tool provides commands for:
    - Deleting CloudFormation stacks of edge functions no longer
      attached to any CloudFront distribution
    """
    logging.getLogger().setLevel(log_level)
    ctx.ensure_object(dict)
    ctx.obj["profile"] = profile


@cli.command(name="delete-fns")
@click.pass_context
def delete_fns(ctx: click.Context):
    """
    Delete orphaned Lambda@Edge functions in us-east-1

    Lists Lambda@Edge functions and the functions attached to CloudFront
    cache behaviors. For each edge function with no attachment, finds the
    CloudFormation stack that created it and requests its deletion.

    ⚠️  CAUTION: This command deletes CloudFormation stacks without confirmation.

    Examples:

      # Delete stacks of unattached edge functions
      edge-cleanup delete-fns

      # Use specific AWS profile
      edge-cleanup --profile my-profile delete-fns
    """
    try:
        profile = ctx.obj.get("profile")
        console.print(
            f"[bold blue]Deleting orphaned Lambda@Edge functions in {EDGE_REGION}[/bold blue]"
        )
        if profile:
            console.print(f"Profile: {profile}")
        console.print()

        cleanup = EdgeFunctionCleanup(profile=profile)
        result = cleanup.run()

        display.show_cleanup_summary(result)

    except Exception as e:
        logger.error(f"Error deleting orphaned edge functions: {e}", exc_info=True)
        error_console.print(f"[red]✗ Error: {e}[/red]")
        sys.exit(1)


def main():
    """Main entry point for the CLI"""
    cli(obj={})


if __name__ == "__main__":
    main()
