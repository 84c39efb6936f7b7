"""Deploy static sites to S3 and invalidate their CloudFront cache."""

from .commands import COMMANDS, Command, domain_info, invalidate_cache, run_command, sync_to_s3
from .config import DeployConfig
from .context import DeployContext
from .domain import WEB_APP_DOMAIN_OUTPUT, DomainResolver
from .exceptions import (
  BucketClearError,
  ConfigError,
  DeployError,
  DomainLookupError,
  InvalidationError,
  LocalTreeError,
  UploadError,
)
from .invalidation import CacheInvalidator
from .sync import BucketSynchronizer, LocalFile, SyncResult, content_type_for, walk_files

__all__ = [
  "COMMANDS",
  "WEB_APP_DOMAIN_OUTPUT",
  "BucketClearError",
  "BucketSynchronizer",
  "CacheInvalidator",
  "Command",
  "ConfigError",
  "DeployConfig",
  "DeployContext",
  "DeployError",
  "DomainLookupError",
  "DomainResolver",
  "InvalidationError",
  "LocalFile",
  "LocalTreeError",
  "SyncResult",
  "UploadError",
  "content_type_for",
  "domain_info",
  "invalidate_cache",
  "run_command",
  "sync_to_s3",
  "walk_files",
]
