"""Look up the web app's CloudFront domain from stack outputs."""

from collections.abc import Callable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from site_deploy.exceptions import DomainLookupError

# Output key exported by the web app stack
WEB_APP_DOMAIN_OUTPUT = "WebAppCloudFrontDistributionOutput"


class DomainResolver:
  """Read the distribution domain name exported by a CloudFormation stack."""

  def __init__(self, cloudformation_client: Any, log: Callable[[str], None] = print) -> None:
    self.cloudformation = cloudformation_client
    self.log = log

  def resolve_domain(self, stack_name: str) -> str | None:
    """Return the web app domain exported by the stack.

    Args:
      stack_name: CloudFormation stack name (e.g., 'app-prod')

    Returns:
      The output value, or None if the stack has no such output.

    Raises:
      DomainLookupError: If the stack cannot be described.
    """
    try:
      response = self.cloudformation.describe_stacks(StackName=stack_name)
    except (BotoCoreError, ClientError) as e:
      self.log(f"Could not describe stack {stack_name}: {e}")
      raise DomainLookupError(stack_name) from e

    stacks = response.get("Stacks", [])
    if not stacks:
      self.log(f"Stack {stack_name} not found")
      raise DomainLookupError(stack_name)

    for output in stacks[0].get("Outputs", []):
      if output.get("OutputKey") == WEB_APP_DOMAIN_OUTPUT and output.get("OutputValue"):
        domain: str = output["OutputValue"]
        self.log(f"Web App Domain: {domain}")
        return domain

    self.log("Web App Domain: Not Found")
    return None
