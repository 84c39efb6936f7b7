"""CDK stack for a service's web app at one stage."""

from typing import Any

import aws_cdk as cdk
from aws_cdk import CfnOutput, RemovalPolicy
from constructs import Construct

from infrastructure.cdk_constructs import StorageBucket, WebAppDistribution
from site_deploy.config import DeployConfig
from site_deploy.domain import WEB_APP_DOMAIN_OUTPUT

REMOVAL_POLICIES = {
  "retain": RemovalPolicy.RETAIN,
  "destroy": RemovalPolicy.DESTROY,
}


class WebAppStack(cdk.Stack):
  """Bucket and distribution that `site-deploy` syncs to and invalidates."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    deploy_config: DeployConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    removal_policy = REMOVAL_POLICIES.get(
      deploy_config.removal_policy, RemovalPolicy.RETAIN
    )

    self.storage = StorageBucket(
      self,
      "Storage",
      bucket_name=deploy_config.bucket,
      removal_policy=removal_policy,
    )
    self.web_app = WebAppDistribution(self, "WebApp", bucket=self.storage.bucket)

    # Outputs live on the stack itself so their keys are not suffixed
    CfnOutput(
      self,
      WEB_APP_DOMAIN_OUTPUT,
      value=self.web_app.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "BucketName",
      value=self.storage.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.web_app.distribution.distribution_id,
      description="CloudFront distribution ID",
    )

    cdk.Tags.of(self).add("Service", deploy_config.service)
    cdk.Tags.of(self).add("Stage", deploy_config.stage)
