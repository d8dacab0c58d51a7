import pytest

from pushdown import AutomataBuilder


@pytest.fixture(params=["asyncio", "trio"])
def anyio_backend(request):
    return request.param


@pytest.fixture
def brackets_builder() -> AutomataBuilder[str, str, str]:
    # balanced "()" and "[]" over a "$" bottom marker
    rules = {}
    for top in ["$", "(", "["]:
        rules[("q", "(", top)] = ("q", ["(", top])
        rules[("q", "[", top)] = ("q", ["[", top])
    rules[("q", ")", "(")] = ("q", [])
    rules[("q", "]", "[")] = ("q", [])
    rules[("q", None, "$")] = ("q", [])
    return AutomataBuilder("q", ["$"], rules)
