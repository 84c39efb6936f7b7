"""CloudFront cache invalidation for a deployed web app."""

import time
from collections.abc import Callable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from site_deploy.domain import DomainResolver
from site_deploy.exceptions import DeployError, InvalidationError

INVALIDATION_PATHS = ("/*",)


def caller_reference() -> str:
  """Time-based reference that identifies a single invalidation request."""
  return str(time.time())


class CacheInvalidator:
  """Invalidate the distribution serving a stack's web app."""

  def __init__(
    self,
    cloudfront_client: Any,
    resolver: DomainResolver,
    log: Callable[[str], None] = print,
  ) -> None:
    self.cloudfront = cloudfront_client
    self.resolver = resolver
    self.log = log

  def find_distribution(self, domain: str) -> dict[str, Any] | None:
    """Return the first distribution whose domain name matches."""
    paginator = self.cloudfront.get_paginator("list_distributions")
    for page in paginator.paginate():
      for distribution in page.get("DistributionList", {}).get("Items", []):
        if distribution.get("DomainName") == domain:
          return distribution
    return None

  def invalidate(self, stack_name: str) -> str | None:
    """Invalidate every path on the stack's distribution.

    Returns:
      The invalidation id, or None when there was nothing to invalidate.

    Raises:
      InvalidationError: If any AWS call fails.
    """
    try:
      domain = self.resolver.resolve_domain(stack_name)
      if domain is None:
        self.log(f"No web app domain for {stack_name}, skipping invalidation")
        return None

      distribution = self.find_distribution(domain)
      if distribution is None:
        self.log(f"No CloudFront distribution found for {domain}")
        return None

      distribution_id = distribution["Id"]
      self.log(f"Invalidating CloudFront distribution with id: {distribution_id}")
      response = self.cloudfront.create_invalidation(
        DistributionId=distribution_id,
        InvalidationBatch={
          "Paths": {
            "Quantity": len(INVALIDATION_PATHS),
            "Items": list(INVALIDATION_PATHS),
          },
          "CallerReference": caller_reference(),
        },
      )
    except (BotoCoreError, ClientError, DeployError) as e:
      self.log(f"Failed invalidating CloudFront cache {e}")
      raise InvalidationError(stack_name, e) from e

    invalidation_id: str = response["Invalidation"]["Id"]
    self.log(f"Created invalidation: {invalidation_id}")
    return invalidation_id
