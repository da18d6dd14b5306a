from aws_cdk import (
    Tags,
    aws_certificatemanager as acm,
    aws_ec2 as ec2,
    aws_elasticloadbalancingv2 as elbv2,
    aws_route53 as route53,
    aws_route53_targets as targets,
)
from constructs import Construct

from common import constants
from common.stack_context import StackContext


def create_vpc(scope: Construct, context: StackContext) -> ec2.Vpc:
    return ec2.Vpc(
        scope,
        "Vpc",
        vpc_name=context.build_resource_name("vpc"),
        max_azs=constants.MAX_AZS,
        nat_gateways=constants.NAT_GATEWAYS,
        subnet_configuration=[
            ec2.SubnetConfiguration(
                name=constants.PUBLIC_SUBNET_NAME,
                subnet_type=ec2.SubnetType.PUBLIC,
                cidr_mask=constants.CIDR_MASK,
            ),
            ec2.SubnetConfiguration(
                name=constants.PRIVATE_SUBNET_NAME,
                subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                cidr_mask=constants.CIDR_MASK,
            ),
        ],
    )


def create_alb_security_group(
    scope: Construct, context: StackContext, vpc: ec2.IVpc
) -> ec2.SecurityGroup:
    return ec2.SecurityGroup(
        scope,
        "AlbSecurityGroup",
        vpc=vpc,
        security_group_name=context.build_resource_name("alb-sg"),
        description="Security group for ALB",
        allow_all_outbound=True,
    )


def lookup_hosted_zone(scope: Construct, context: StackContext) -> route53.IHostedZone:
    """Resolve the existing zone for the domain; requires a concrete account and region."""
    return route53.HostedZone.from_lookup(
        scope, "HostedZone", domain_name=context.domain_name
    )


def create_certificate(
    scope: Construct, context: StackContext, hosted_zone: route53.IHostedZone
) -> acm.Certificate:
    return acm.Certificate(
        scope,
        "Certificate",
        domain_name=context.domain_name,
        validation=acm.CertificateValidation.from_dns(hosted_zone),
    )


def create_application_load_balancer(
    scope: Construct,
    context: StackContext,
    vpc: ec2.IVpc,
    security_group: ec2.ISecurityGroup,
) -> elbv2.ApplicationLoadBalancer:
    name = context.build_resource_name("alb")
    alb = elbv2.ApplicationLoadBalancer(
        scope,
        "LoadBalancer",
        vpc=vpc,
        internet_facing=True,
        security_group=security_group,
        vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PUBLIC),
        load_balancer_name=name,
    )
    Tags.of(alb).add("Name", name)
    return alb


def add_https_listener(
    alb: elbv2.ApplicationLoadBalancer, certificate: acm.ICertificate
) -> elbv2.ApplicationListener:
    """Terminate TLS and answer 404 until a service adds its own rules."""
    return alb.add_listener(
        "HttpsListener",
        port=constants.HTTPS_PORT,
        protocol=elbv2.ApplicationProtocol.HTTPS,
        certificates=[elbv2.ListenerCertificate.from_certificate_manager(certificate)],
        default_action=elbv2.ListenerAction.fixed_response(
            constants.DEFAULT_RESPONSE_STATUS,
            content_type=constants.DEFAULT_RESPONSE_CONTENT_TYPE,
            message_body=constants.DEFAULT_RESPONSE_BODY,
        ),
    )


def add_http_redirect_listener(
    alb: elbv2.ApplicationLoadBalancer,
) -> elbv2.ApplicationListener:
    return alb.add_listener(
        "HttpListener",
        port=constants.HTTP_PORT,
        protocol=elbv2.ApplicationProtocol.HTTP,
        default_action=elbv2.ListenerAction.redirect(
            protocol="HTTPS",
            port=str(constants.HTTPS_PORT),
            permanent=True,
        ),
    )


def create_alias_record(
    scope: Construct,
    context: StackContext,
    hosted_zone: route53.IHostedZone,
    alb: elbv2.IApplicationLoadBalancer,
) -> route53.ARecord:
    return route53.ARecord(
        scope,
        "LoadBalancerDnsRecord",
        zone=hosted_zone,
        target=route53.RecordTarget.from_alias(targets.LoadBalancerTarget(alb)),
        record_name=context.domain_name,
    )
