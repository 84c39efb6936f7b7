#!/usr/bin/env python3
"""CDK application entry point for the web app infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from infrastructure.stacks import WebAppStack
from site_deploy.config import DeployConfig


def main() -> None:
  """Create the CDK app with the web app stack for the selected stage."""
  app = cdk.App()

  config_path = app.node.try_get_context("config") or "deploy.yaml"
  stage = app.node.try_get_context("stage")
  config = DeployConfig.from_yaml(Path(config_path), stage=stage)

  WebAppStack(
    app,
    config.stack_name,
    deploy_config=config,
    env=cdk.Environment(region=config.region),
    description=f"Web app origin and CDN for {config.service} ({config.stage})",
  )

  app.synth()


if __name__ == "__main__":
  main()
