from typing import Any, Callable

from attrs import define


@define(slots=True, frozen=True)
class PublishedParameter:
    field: str
    construct_id: str
    source: str  # declaration step producing the value
    value: Callable[[Any], str]
    description: str


PUBLISHED_PARAMETERS = (
    PublishedParameter(
        field="vpc-id",
        construct_id="VpcId",
        source="vpc",
        value=lambda vpc: vpc.vpc_id,
        description="Shared VPC ID",
    ),
    PublishedParameter(
        field="event-bus-name",
        construct_id="EventBusName",
        source="event_bus",
        value=lambda bus: bus.event_bus_name,
        description="Service-to-service EventBridge bus name",
    ),
    PublishedParameter(
        field="shared-log-group-name",
        construct_id="SharedLogGroupName",
        source="shared_log_group",
        value=lambda log_group: log_group.log_group_name,
        description="Shared CloudWatch log group name",
    ),
    PublishedParameter(
        field="alb-dns",
        construct_id="LoadBalancerDns",
        source="load_balancer",
        value=lambda alb: alb.load_balancer_dns_name,
        description="Shared ALB DNS name",
    ),
    PublishedParameter(
        field="alb-arn",
        construct_id="LoadBalancerARN",
        source="load_balancer",
        value=lambda alb: alb.load_balancer_arn,
        description="Shared ALB ARN",
    ),
    PublishedParameter(
        field="alb-https-listener-arn",
        construct_id="HTTPSListenerARN",
        source="https_listener",
        value=lambda listener: listener.listener_arn,
        description="Shared ALB HTTPS listener ARN",
    ),
    PublishedParameter(
        field="certificate-arn",
        construct_id="CertificateARN",
        source="certificate",
        value=lambda certificate: certificate.certificate_arn,
        description="ACM certificate ARN for the domain",
    ),
    PublishedParameter(
        field="github-actions-role-arn",
        construct_id="GitHubActionsRoleArn",
        source="github_actions_role",
        value=lambda role: role.role_arn,
        description="GitHub Actions deployment role ARN",
    ),
)
