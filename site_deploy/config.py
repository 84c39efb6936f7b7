"""Configuration loader for site deploys."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from site_deploy.exceptions import ConfigError

DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"
DEFAULT_UPLOAD_WORKERS = 8


@dataclass
class DeployConfig:
  """Settings for one service deployed to one stage."""

  service: str
  bucket: str
  local_path: Path
  stage: str = DEFAULT_STAGE
  profile: str | None = None
  region: str = DEFAULT_REGION
  upload_workers: int = DEFAULT_UPLOAD_WORKERS
  removal_policy: str = "retain"  # "retain" or "destroy", read by the CDK app

  @property
  def stack_name(self) -> str:
    """CloudFormation stack name for this service and stage."""
    return f"{self.service}-{self.stage}"

  @classmethod
  def from_yaml(
    cls, path: Path | str = "deploy.yaml", stage: str | None = None
  ) -> "DeployConfig":
    """Load configuration for a stage from a YAML file."""
    path = Path(path)
    try:
      with open(path) as f:
        data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
      raise ConfigError(f"Config file {path} not found") from e

    return cls.from_dict(data, stage=stage, base_dir=path.parent)

  @classmethod
  def from_dict(
    cls,
    data: dict[str, Any],
    stage: str | None = None,
    base_dir: Path | None = None,
  ) -> "DeployConfig":
    """Build configuration from already parsed data."""
    service = data.get("service")
    if not service:
      raise ConfigError("Config is missing 'service'")

    stage = stage or data.get("default_stage") or DEFAULT_STAGE
    stages = data.get("stages") or {}
    if stages and stage not in stages:
      raise ConfigError(f"Unknown stage '{stage}' for service {service}")

    # Merge defaults with stage-specific config
    merged = {**(data.get("defaults") or {}), **(stages.get(stage) or {})}

    bucket = merged.get("bucket")
    if not bucket:
      raise ConfigError(f"No bucket configured for stage '{stage}'")

    local_path = Path(merged.get("local_path", "app"))
    if base_dir is not None and not local_path.is_absolute():
      local_path = base_dir / local_path

    try:
      upload_workers = int(merged.get("upload_workers", DEFAULT_UPLOAD_WORKERS))
    except (TypeError, ValueError) as e:
      raise ConfigError("upload_workers must be a whole number") from e
    if upload_workers < 1:
      raise ConfigError("upload_workers must be at least 1")

    return cls(
      service=service,
      bucket=bucket,
      local_path=local_path,
      stage=stage,
      profile=merged.get("profile"),
      region=merged.get("region", DEFAULT_REGION),
      upload_workers=upload_workers,
      removal_policy=str(merged.get("removal_policy", "retain")).lower(),
    )
