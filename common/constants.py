from aws_cdk import aws_logs as logs

APP_NAME = "haydenturek"  # The application name
DOMAIN_NAME = "haydenturek.com"
SERVICE_NAME = "shared-infra"  # Stack suffix and parameter category

DEFAULT_ENV = "dev"
DEFAULT_REGION = "us-east-1"
ENVIRONMENT_CONTEXT_KEY = "environment"
ACCOUNT_ENV_VAR = "CDK_DEFAULT_ACCOUNT"
REGION_ENV_VAR = "CDK_DEFAULT_REGION"

# Identifier formats
NAME_PATTERN = r"^[a-z0-9][a-z0-9-]*$"
DOMAIN_NAME_PATTERN = r"^(?=.{1,253}$)([a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}$"

# Networking
MAX_AZS = 2
NAT_GATEWAYS = 1
CIDR_MASK = 24
PUBLIC_SUBNET_NAME = "Public"
PRIVATE_SUBNET_NAME = "Private"
HTTP_PORT = 80
HTTPS_PORT = 443

# Placeholder response until an application registers a routing rule
DEFAULT_RESPONSE_STATUS = 404
DEFAULT_RESPONSE_CONTENT_TYPE = "text/plain"
DEFAULT_RESPONSE_BODY = "Hooked up!"

SHARED_LOG_RETENTION = logs.RetentionDays.ONE_MONTH

# GitHub Actions federation
GITHUB_OWNER = "haydenturek"
GITHUB_OIDC_HOST = "token.actions.githubusercontent.com"
GITHUB_OIDC_PROVIDER_ARN = "arn:aws:iam::{account}:oidc-provider/{host}"
GITHUB_OIDC_AUDIENCE = "sts.amazonaws.com"
GITHUB_SUBJECT_PATTERN = "repo:{owner}/*:*"

DEPLOYMENT_ACTIONS = (
    "cloudformation:*",
    "ec2:*",
    "ecs:*",
    "ecr:*",
    "route53:*",
    "elasticloadbalancing:*",
    "iam:*",
    "logs:*",
    "s3:*",
    "secretsmanager:*",
    "ssm:*",
    "bedrock:*",
    "bedrock-runtime:*",
    "stepfunctions:*",
    "events:*",
    "dynamodb:*",
)
