from functools import partial
from typing import Any

from aws_cdk import (
    RemovalPolicy,
    Stack,
    aws_events as events,
    aws_logs as logs,
    aws_ssm as ssm,
)
from constructs import Construct

from common import constants
from common.declaration_graph import DeclarationGraph
from common.stack_context import StackContext
from identity import github_actions
from networking import builders
from shared_infra.published_parameters import PUBLISHED_PARAMETERS, PublishedParameter


class SharedInfraStack(Stack):

    def __init__(
        self, scope: Construct, construct_id: str, *, context: StackContext, **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self.context = context

        graph = DeclarationGraph()

        # Network and its traffic boundary
        graph.declare("vpc", partial(builders.create_vpc, self, context))
        graph.declare(
            "alb_security_group",
            partial(builders.create_alb_security_group, self, context),
            depends_on=("vpc",),
        )

        # DNS zone and the certificate validated against it
        graph.declare("hosted_zone", partial(builders.lookup_hosted_zone, self, context))
        graph.declare(
            "certificate",
            partial(builders.create_certificate, self, context),
            depends_on=("hosted_zone",),
        )

        # Load balancer, listeners and the alias record pointing at it
        graph.declare(
            "load_balancer",
            partial(builders.create_application_load_balancer, self, context),
            depends_on=("vpc", "alb_security_group"),
        )
        graph.declare(
            "https_listener",
            builders.add_https_listener,
            depends_on=("load_balancer", "certificate"),
        )
        graph.declare(
            "http_listener",
            builders.add_http_redirect_listener,
            depends_on=("load_balancer",),
        )
        graph.declare(
            "dns_record",
            partial(builders.create_alias_record, self, context),
            depends_on=("hosted_zone", "load_balancer"),
        )

        graph.declare("event_bus", self._build_event_bus)
        graph.declare("shared_log_group", self._build_shared_log_group)

        # CI deployment identity
        graph.declare(
            "github_oidc_provider",
            partial(github_actions.import_github_oidc_provider, self),
        )
        graph.declare(
            "github_actions_role",
            partial(github_actions.create_github_actions_role, self, context),
            depends_on=("github_oidc_provider",),
        )

        # Cross-stack handoff
        for parameter in PUBLISHED_PARAMETERS:
            graph.declare(
                f"parameter:{parameter.field}",
                partial(self._publish_parameter, parameter),
                depends_on=(parameter.source,),
            )

        resources = graph.materialize()

        self.vpc = resources["vpc"]
        self.alb_security_group = resources["alb_security_group"]
        self.hosted_zone = resources["hosted_zone"]
        self.certificate = resources["certificate"]
        self.load_balancer = resources["load_balancer"]
        self.https_listener = resources["https_listener"]
        self.http_listener = resources["http_listener"]
        self.dns_record = resources["dns_record"]
        self.event_bus = resources["event_bus"]
        self.shared_log_group = resources["shared_log_group"]
        self.github_actions_role = resources["github_actions_role"]
        self.parameters = {
            parameter.field: resources[f"parameter:{parameter.field}"]
            for parameter in PUBLISHED_PARAMETERS
        }

    # Resource creation

    def _build_event_bus(self) -> events.EventBus:
        """Bus for service-to-service communication."""
        return events.EventBus(
            self,
            "EventBus",
            event_bus_name=self.context.build_resource_name("event-bus"),
        )

    def _build_shared_log_group(self) -> logs.LogGroup:
        return logs.LogGroup(
            self,
            "SharedLogGroup",
            log_group_name=self.context.build_log_group_name(),
            retention=constants.SHARED_LOG_RETENTION,
            removal_policy=RemovalPolicy.RETAIN,
        )

    def _publish_parameter(
        self, parameter: PublishedParameter, source: Any
    ) -> ssm.StringParameter:
        return ssm.StringParameter(
            self,
            parameter.construct_id,
            description=parameter.description,
            parameter_name=self.context.build_parameter_name(parameter.field),
            string_value=parameter.value(source),
        )
