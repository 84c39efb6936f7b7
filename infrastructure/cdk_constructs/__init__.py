"""CDK constructs for the web app origin and CDN."""

from .distribution import WebAppDistribution
from .storage import StorageBucket

__all__ = [
  "StorageBucket",
  "WebAppDistribution",
]
