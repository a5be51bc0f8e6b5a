"""
Conformance: Report classification - errors and unresolved modules
"""
import pytest

SOURCE = "import a from 'a';\nimport b from './b';\nlet c: C;\n"

# Each test case is a tuple: (description, errors, expected_outcome)
# expected_outcome is "clean", "errors" or "unresolved"

CASES = [
    ("no_errors", [], "clean"),
    ("missing_module", [(14, 2307, "Cannot find module 'a'.")], "unresolved"),
    ("missing_name", [(26, 2304, "Cannot find name 'C'.")], "errors"),
    ("near_miss_code", [(14, 2792, "Cannot find module 'a'. Did you mean...")], "errors"),
    ("mixed", [(26, 2304, "Cannot find name 'C'."), (33, 2307, "Cannot find module './b'.")], "unresolved"),
]


@pytest.mark.parametrize("description,errors,expected", CASES, ids=[c[0] for c in CASES])
def test_unresolved_modules(runner, description, errors, expected):
    """Reports classify clean, failing and unresolved-module compilations."""
    result = runner.check(SOURCE, errors)
    if expected == "clean":
        assert result.clean, f"Expected clean but got errors: {result.diagnostics}"
        assert not result.unresolved_modules
    else:
        assert not result.clean, "Expected errors but got a clean report"
        assert result.unresolved_modules == (expected == "unresolved")
        assert len(result.diagnostics) == len(errors)


def test_diagnostic_order_preserved(runner):
    """Diagnostics keep the checker's order, including duplicates."""
    errors = [(26, 2304, "second"), (0, 1005, "first"), (26, 2304, "second")]
    result = runner.check(SOURCE, errors)
    assert [d.rsplit(": ", 1)[1] for d in result.diagnostics] == ["second", "first", "second"]
