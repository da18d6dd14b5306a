from graphlib import TopologicalSorter
from typing import Any, Callable, Mapping

from attrs import define, field
from aws_lambda_powertools import Logger
from constructs import Construct

from common import constants

logger = Logger(service=constants.SERVICE_NAME)


class DeclarationError(ValueError):
    """Raised when the declaration plan itself is malformed."""


class UnresolvedReferenceError(DeclarationError):
    pass


class DuplicateDeclarationError(DeclarationError):
    pass


@define(slots=True, frozen=True)
class DeclarationStep:
    name: str
    build: Callable[..., Any]
    depends_on: tuple[str, ...] = ()


@define(slots=True)
class DeclarationGraph:
    """Ordered plan of resource declarations with explicit dependency edges.

    A step may only depend on steps declared before it, so the plan is acyclic
    by construction and an unknown reference fails at ``declare`` time rather
    than during deployment.
    """

    steps: dict[str, DeclarationStep] = field(factory=dict)

    def declare(
        self,
        name: str,
        build: Callable[..., Any],
        depends_on: tuple[str, ...] = (),
    ) -> None:
        if name in self.steps:
            raise DuplicateDeclarationError(f"'{name}' is already declared")
        missing = [dependency for dependency in depends_on if dependency not in self.steps]
        if missing:
            raise UnresolvedReferenceError(
                f"'{name}' references undeclared resources: {', '.join(missing)}"
            )
        self.steps[name] = DeclarationStep(name=name, build=build, depends_on=tuple(depends_on))

    def order(self) -> list[str]:
        sorter = TopologicalSorter(
            {name: step.depends_on for name, step in self.steps.items()}
        )
        return list(sorter.static_order())

    def materialize(self) -> Mapping[str, Any]:
        """Build every step once, dependencies first."""
        results: dict[str, Any] = {}
        for name in self.order():
            step = self.steps[name]
            dependencies = [results[dependency] for dependency in step.depends_on]
            value = step.build(*dependencies)
            for dependency in dependencies:
                _add_explicit_dependency(value, dependency)
            logger.debug(
                "Declared resource",
                extra={"step": name, "depends_on": list(step.depends_on)},
            )
            results[name] = value
        return results


def _add_explicit_dependency(value: Any, dependency: Any) -> None:
    # Plain values (ARNs, names) carry no ordering.
    if not isinstance(value, Construct) or not isinstance(dependency, Construct):
        return
    # A child already deploys inside its parent; depending on the parent would
    # make it depend on its siblings too.
    if value.node.path.startswith(f"{dependency.node.path}/"):
        return
    value.node.add_dependency(dependency)
