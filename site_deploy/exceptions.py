"""Errors raised by deploy commands."""


class DeployError(Exception):
  """Base class for every failure a deploy command reports."""


class ConfigError(DeployError):
  """Deploy configuration is missing or invalid."""


class BucketClearError(DeployError):
  """Listing or deleting objects in the target bucket failed."""

  def __init__(self, bucket: str) -> None:
    super().__init__(f"Error in cleaning {bucket} bucket")
    self.bucket = bucket


class UploadError(DeployError):
  """A single file could not be uploaded."""

  def __init__(self, key: str) -> None:
    super().__init__(f"Error in uploading {key} to s3 bucket")
    self.key = key


class DomainLookupError(DeployError):
  """The CloudFormation stack could not be queried."""

  def __init__(self, stack_name: str) -> None:
    super().__init__(f"Could not extract Web App Domain from stack {stack_name}")
    self.stack_name = stack_name


class InvalidationError(DeployError):
  """Distribution lookup or invalidation submission failed."""

  def __init__(self, stack_name: str, cause: BaseException) -> None:
    super().__init__(f"Failed invalidating CloudFront cache for {stack_name}: {cause}")
    self.stack_name = stack_name
    self.cause = cause


class LocalTreeError(DeployError):
  """A directory under the sync root could not be read."""

  def __init__(self, path: str) -> None:
    super().__init__(f"Error reading {path}")
    self.path = path
