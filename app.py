#!/usr/bin/env python3
"""AWS CDK entrypoint for provisioning the shared infrastructure baseline.

Select the deployment target with ``-c environment=<name>`` (defaults to
``dev``). Account and region come from the CDK CLI defaults; the region falls
back to us-east-1 when unset.
"""
import os

import aws_cdk as cdk
from aws_cdk import Environment, cx_api
from aws_lambda_powertools import Logger

from common import constants
from common.stack_context import StackContext
from shared_infra.shared_infra_stack import SharedInfraStack

logger = Logger(service=constants.SERVICE_NAME)


def build_environment() -> Environment:
    return Environment(
        account=os.getenv(constants.ACCOUNT_ENV_VAR),
        region=os.getenv(constants.REGION_ENV_VAR) or constants.DEFAULT_REGION,
    )


def build_shared_infra(app: cdk.App) -> SharedInfraStack:
    context = StackContext.from_app(app)
    logger.append_keys(app_name=context.app_name, environment=context.environment)
    logger.info(f"Declaring stack {context.stack_name}")
    return SharedInfraStack(
        app,
        context.stack_name,
        context=context,
        env=build_environment(),
        description=context.description,
    )


def ensure_no_synthesis_errors(assembly: cx_api.CloudAssembly) -> None:
    """Fail the run when synthesis recorded errors, e.g. a hosted zone that cannot be found."""
    errors = [
        message
        for stack in assembly.stacks
        for message in stack.messages
        if message.level == cx_api.SynthesisMessageLevel.ERROR
    ]
    for message in errors:
        logger.error(f"{message.id}: {message.entry.data}")
    if errors:
        raise SystemExit(1)


def main() -> None:
    app = cdk.App()
    build_shared_infra(app)
    ensure_no_synthesis_errors(app.synth())


if __name__ == "__main__":
    main()
