"""Per-invocation context handed to every deploy command."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import ProfileNotFound

from site_deploy.config import DeployConfig
from site_deploy.exceptions import ConfigError


@dataclass
class DeployContext:
  """Configuration, log sink and AWS session for a single command run."""

  config: DeployConfig
  log: Callable[[str], None] = print
  session: Any = None

  def __post_init__(self) -> None:
    if self.session is None:
      try:
        self.session = boto3.Session(
          profile_name=self.config.profile,
          region_name=self.config.region,
        )
      except ProfileNotFound as e:
        raise ConfigError(str(e)) from e

  def client(self, service_name: str) -> Any:
    """Create a new client for an AWS service."""
    return self.session.client(service_name)

