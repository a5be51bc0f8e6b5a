"""Shared fixtures for the tsbridge conformance cases."""

import pytest
from tests.conformance.runners.default_runner import DefaultRunner, SerializedRunner

RUNNERS = (DefaultRunner(), SerializedRunner())


@pytest.fixture(params=RUNNERS, ids=lambda r: r.name)
def runner(request):
    """Each conformance case runs once per runner.

    ``default`` queries the report as built; ``serialized`` sends it
    through ``to_dict``, JSON and ``from_dict`` before querying, so both
    must agree on every case.
    """
    return request.param
