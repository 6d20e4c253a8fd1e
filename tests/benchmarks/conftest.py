"""pytest-benchmark configuration for nuggetlex benchmarks.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add nuggetlex metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "nuggetlex"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def rendered_page() -> str:
    """A rendered HTML page with a few hundred nuggets."""
    row = (
        "<tr><td>[[[Name///column header]]]</td>"
        "<td>[[[Welcome %0|||(((Dear [[[Customer]]])))]]]</td>"
        "<td>[[[%0 of %1|||3|||10]]]</td></tr>\n"
    )
    return "<table>\n" + row * 200 + "</table>"
