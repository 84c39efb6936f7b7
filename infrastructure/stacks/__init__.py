"""CDK stacks for the web app."""

from .web_app_stack import WebAppStack

__all__ = ["WebAppStack"]
