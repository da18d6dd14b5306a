from aws_cdk import Stack, aws_iam as iam
from constructs import Construct

from common import constants
from common.stack_context import StackContext


def import_github_oidc_provider(scope: Construct) -> iam.IOpenIdConnectProvider:
    """Reference the account's existing GitHub OIDC provider."""
    provider_arn = constants.GITHUB_OIDC_PROVIDER_ARN.format(
        account=Stack.of(scope).account, host=constants.GITHUB_OIDC_HOST
    )
    return iam.OpenIdConnectProvider.from_open_id_connect_provider_arn(
        scope, "GitHubOidcProvider", provider_arn
    )


def build_trust_conditions() -> dict[str, dict[str, str]]:
    """Restrict the federated principal to STS tokens from the owner's repositories."""
    return {
        "StringEquals": {
            f"{constants.GITHUB_OIDC_HOST}:aud": constants.GITHUB_OIDC_AUDIENCE,
        },
        "StringLike": {
            f"{constants.GITHUB_OIDC_HOST}:sub": constants.GITHUB_SUBJECT_PATTERN.format(
                owner=constants.GITHUB_OWNER
            ),
        },
    }


def create_github_actions_role(
    scope: Construct,
    context: StackContext,
    provider: iam.IOpenIdConnectProvider,
) -> iam.Role:
    role = iam.Role(
        scope,
        "GitHubActionsRole",
        role_name=context.build_resource_name("github-actions-role"),
        assumed_by=iam.WebIdentityPrincipal(
            provider.open_id_connect_provider_arn, build_trust_conditions()
        ),
        description="Role for GitHub Actions to deploy",
    )
    role.add_to_policy(
        iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=list(constants.DEPLOYMENT_ACTIONS),
            resources=["*"],
        )
    )
    return role
