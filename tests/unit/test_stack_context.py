import pytest
from attrs.exceptions import FrozenInstanceError
from aws_cdk import App
from common.stack_context import StackContext

# ------------------- Naming tests -------------------

RESOURCE_NAMES = [
    ("vpc", "haydenturek-prod-vpc"),
    ("alb", "haydenturek-prod-alb"),
    ("alb-sg", "haydenturek-prod-alb-sg"),
    ("event-bus", "haydenturek-prod-event-bus"),
    ("github-actions-role", "haydenturek-prod-github-actions-role"),
]


@pytest.mark.parametrize("suffix,expected", RESOURCE_NAMES)
def test_build_resource_name(suffix: str, expected: str):
    context = StackContext(environment="prod")
    assert context.build_resource_name(suffix) == expected


def test_build_parameter_name():
    context = StackContext(environment="prod")
    assert (
        context.build_parameter_name("alb-dns") == "/haydenturek/prod/shared-infra/alb-dns"
    )


def test_stack_name_and_description():
    context = StackContext(environment="staging")
    assert context.stack_name == "haydenturek-staging-shared-infra"
    assert context.description == "Shared infrastructure for haydenturek staging environment"
    assert context.build_log_group_name() == "/haydenturek/staging/shared-logs"


def test_defaults():
    context = StackContext()
    assert context.app_name == "haydenturek"
    assert context.environment == "dev"
    assert context.domain_name == "haydenturek.com"


def test_context_is_immutable():
    context = StackContext()
    with pytest.raises(FrozenInstanceError):
        context.environment = "prod"


# ------------------- Validation tests -------------------


@pytest.mark.parametrize("environment", ["", "Prod", "prod env", "-prod", "prod/1"])
def test_malformed_environment_is_rejected(environment: str):
    with pytest.raises(ValueError):
        StackContext(environment=environment)


@pytest.mark.parametrize("app_name", ["", "Hayden", "hayden_turek"])
def test_malformed_app_name_is_rejected(app_name: str):
    with pytest.raises(ValueError):
        StackContext(app_name=app_name)


@pytest.mark.parametrize("domain_name", ["localhost", "example..com", "-example.com", "https://example.com"])
def test_malformed_domain_is_rejected(domain_name: str):
    with pytest.raises(ValueError):
        StackContext(domain_name=domain_name)


def test_non_string_environment_is_rejected():
    with pytest.raises(TypeError):
        StackContext(environment=3)


# ------------------- CDK context tests -------------------


def test_from_app_defaults_to_dev():
    assert StackContext.from_app(App()).environment == "dev"


def test_from_app_reads_environment_context():
    context = StackContext.from_app(App(context={"environment": "prod"}))
    assert context.environment == "prod"
    assert context.stack_name == "haydenturek-prod-shared-infra"


def test_from_app_accepts_overrides():
    context = StackContext.from_app(App(), domain_name="example.com")
    assert context.domain_name == "example.com"
