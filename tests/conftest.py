import pytest


MAP_ROWS = [
    ["Country", "RDAP"],
    ["DEU", 1],
    ["FRA", 1],
    ["ITA", 0],
]

STATS_ROWS = {
    "all": [["Status", "TLDs"], ["RDAP", 30], ["No RDAP", 10]],
    "generic": [["Status", "TLDs"], ["RDAP", 20], ["No RDAP", 0]],
    "country-code": [["Status", "TLDs"], ["RDAP", 10], ["No RDAP", 10]],
}


class DrawRecorder:
    """Stands in for the page: records (container_id, figure) per draw."""

    def __init__(self):
        self.calls = []

    def __call__(self, container_id, fig):
        self.calls.append((container_id, fig))

    @property
    def containers(self):
        return [container_id for container_id, _ in self.calls]


@pytest.fixture
def map_rows():
    return [list(row) for row in MAP_ROWS]


@pytest.fixture
def stats_rows():
    return {category: [list(row) for row in rows] for category, rows in STATS_ROWS.items()}


@pytest.fixture
def recorder():
    return DrawRecorder()
