import pytest

from vexargs_pkg import ArgContext, ContextInfo, ValueKind


def make_context(description: str = "A demo program") -> ArgContext:
    ctx = ArgContext(ContextInfo("demo", "1.2.3", description))
    ctx.add_option("c", "count", ValueKind.INTEGER, "How many", max_count=1)
    ctx.add_option("r", "ratio", ValueKind.FLOAT, "Ratios", max_count=2)
    ctx.add_option("i", "input", ValueKind.STRING, "Input file", max_count=1)
    ctx.add_option("f", "files", ValueKind.STRING, "Extra files", max_count=-1)
    ctx.add_option("x", "extra", ValueKind.FLAG, "Extra output")
    return ctx


@pytest.fixture
def ctx():
    return make_context()


def argv(*args):
    return ["demo", *args]
