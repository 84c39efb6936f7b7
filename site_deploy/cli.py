#!/usr/bin/env python3
"""Command line entry point for site deploys."""

import argparse
import sys
from dataclasses import replace

from site_deploy.commands import COMMANDS, run_command
from site_deploy.config import DeployConfig
from site_deploy.context import DeployContext
from site_deploy.exceptions import DeployError


def build_parser() -> argparse.ArgumentParser:
  """Create the argument parser with one subcommand per deploy command."""
  parser = argparse.ArgumentParser(
    prog="site-deploy",
    description="Deploy a static site to S3 and manage its CloudFront cache",
  )
  subparsers = parser.add_subparsers(dest="command", required=True)
  for command in COMMANDS.values():
    sub = subparsers.add_parser(command.name, help=command.usage)
    sub.add_argument(
      "--config",
      default="deploy.yaml",
      help="Path to the deploy config (default: deploy.yaml)",
    )
    sub.add_argument("--stage", help="Deployment stage (default: from config)")
    sub.add_argument("--profile", help="AWS credentials profile")
    sub.add_argument("--region", help="AWS region")
  return parser


def main(argv: list[str] | None = None) -> None:
  """Run a deploy command."""
  args = build_parser().parse_args(argv)

  try:
    config = DeployConfig.from_yaml(args.config, stage=args.stage)
    if args.profile:
      config = replace(config, profile=args.profile)
    if args.region:
      config = replace(config, region=args.region)

    run_command(args.command, DeployContext(config=config))
  except DeployError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
  main()
