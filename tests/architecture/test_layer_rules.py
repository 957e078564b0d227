"""
Layer dependency rules.

- Domain must not access Application or Infrastructure
- Application must not access Infrastructure
- Infrastructure must not access Application

Adapters reach the executor only through the ports in domain/interfaces.py.
"""

from pytestarch import LayerRule


def _forbid(layers, source: str, target: str) -> LayerRule:
    return (
        LayerRule()
        .based_on(layers)
        .layers_that()
        .are_named(source)
        .should_not()
        .access_layers_that()
        .are_named(target)
    )


class TestLayerRules:
    """Dependency direction between domain, application and infrastructure."""

    def test_domain_does_not_access_application(self, evaluable, layers):
        """Domain holds models, ports and progress arithmetic only."""
        _forbid(layers, "domain", "application").assert_applies(evaluable)

    def test_domain_does_not_access_infrastructure(self, evaluable, layers):
        _forbid(layers, "domain", "infrastructure").assert_applies(evaluable)

    def test_application_does_not_access_infrastructure(self, evaluable, layers):
        """The executor depends on NodeTransportInterface, not on httpx."""
        _forbid(layers, "application", "infrastructure").assert_applies(evaluable)

    def test_infrastructure_does_not_access_application(self, evaluable, layers):
        _forbid(layers, "infrastructure", "application").assert_applies(evaluable)
