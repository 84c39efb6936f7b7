"""Deploy commands and the table a host dispatches them from."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from site_deploy.context import DeployContext
from site_deploy.domain import DomainResolver
from site_deploy.invalidation import CacheInvalidator
from site_deploy.sync import BucketSynchronizer, SyncResult


def sync_to_s3(ctx: DeployContext) -> SyncResult:
  """Replace the bucket contents with the configured local directory."""
  synchronizer = BucketSynchronizer(
    ctx.client("s3"),
    log=ctx.log,
    max_workers=ctx.config.upload_workers,
  )
  return synchronizer.sync_directory(ctx.config.bucket, ctx.config.local_path)


def domain_info(ctx: DeployContext) -> str | None:
  """Print the deployed CloudFront domain name."""
  resolver = DomainResolver(ctx.client("cloudformation"), log=ctx.log)
  return resolver.resolve_domain(ctx.config.stack_name)


def invalidate_cache(ctx: DeployContext) -> str | None:
  """Invalidate the CloudFront cache for the deployed web app."""
  resolver = DomainResolver(ctx.client("cloudformation"), log=ctx.log)
  invalidator = CacheInvalidator(ctx.client("cloudfront"), resolver, log=ctx.log)
  return invalidator.invalidate(ctx.config.stack_name)


@dataclass(frozen=True)
class Command:
  """A command a host can run with a DeployContext."""

  name: str
  usage: str
  handler: Callable[[DeployContext], Any]


COMMANDS: dict[str, Command] = {
  command.name: command
  for command in (
    Command(
      "syncToS3",
      "Deploys the local app directory to your bucket",
      sync_to_s3,
    ),
    Command(
      "domainInfo",
      "Fetches and prints out the deployed CloudFront domain name",
      domain_info,
    ),
    Command(
      "invalidateCache",
      "Invalidates CloudFront cache",
      invalidate_cache,
    ),
  )
}


def run_command(name: str, ctx: DeployContext) -> Any:
  """Run a command by name."""
  return COMMANDS[name].handler(ctx)
