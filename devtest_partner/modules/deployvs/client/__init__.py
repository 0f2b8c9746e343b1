from .classifier import classify, outcome_error, raise_for_outcome
from .deploy_client import DeployClient, build_deploy_url

__all__ = ["DeployClient", "build_deploy_url", "classify", "outcome_error", "raise_for_outcome"]
