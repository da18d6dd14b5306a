from attrs import define, field
from attrs.validators import and_, instance_of, matches_re
from constructs import Construct

import common.constants as constants


def _identifier(pattern: str):
    return and_(instance_of(str), matches_re(pattern))


@define(slots=True, frozen=True)
class StackContext:
    app_name: str = field(
        default=constants.APP_NAME,
        validator=_identifier(constants.NAME_PATTERN),
        metadata={"description": "Application name used as the naming prefix"},
    )
    environment: str = field(
        default=constants.DEFAULT_ENV,
        validator=_identifier(constants.NAME_PATTERN),
        metadata={"description": "Deployment environment (dev, staging, prod)"},
    )
    domain_name: str = field(
        default=constants.DOMAIN_NAME,
        validator=_identifier(constants.DOMAIN_NAME_PATTERN),
        metadata={"description": "Apex domain served by the load balancer"},
    )

    @classmethod
    def from_app(cls, app: Construct, **overrides) -> "StackContext":
        """Resolve the deployment target from CDK context, defaulting to dev.

        ``cdk deploy -c environment=prod`` selects the prod target.
        """
        environment = (
            app.node.try_get_context(constants.ENVIRONMENT_CONTEXT_KEY)
            or constants.DEFAULT_ENV
        )
        return cls(environment=environment, **overrides)

    # ---------- naming ----------
    @property
    def stack_name(self) -> str:
        return self.build_resource_name(constants.SERVICE_NAME)

    @property
    def description(self) -> str:
        return f"Shared infrastructure for {self.app_name} {self.environment} environment"

    def build_resource_name(self, suffix: str) -> str:
        """Build a physical resource name.

        Examples:
            - vpc: haydenturek-dev-vpc
            - github-actions-role: haydenturek-dev-github-actions-role
        """
        return f"{self.app_name}-{self.environment}-{suffix}"

    def build_parameter_name(self, parameter_field: str) -> str:
        """Build an SSM parameter path, e.g. /haydenturek/dev/shared-infra/vpc-id."""
        return f"/{self.app_name}/{self.environment}/{constants.SERVICE_NAME}/{parameter_field}"

    def build_log_group_name(self) -> str:
        return f"/{self.app_name}/{self.environment}/shared-logs"
