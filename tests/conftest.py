import pytest

from org_chart.models import Employee


@pytest.fixture
def sample_rows():
    return [
        {"id": "1", "name": "Alice", "manager_id": "", "organization": "X"},
        {"id": "2", "name": "Bob", "manager_id": "1", "organization": "X"},
        {"id": "3", "name": "Carol", "manager_id": "1", "organization": "Y"},
        {"id": "4", "name": "Dan", "manager_id": "99", "organization": "Y"},
    ]


@pytest.fixture
def sample_employees():
    return [
        Employee(id="1", name="Alice", organization="X"),
        Employee(id="2", name="Bob", manager_id="1", organization="X"),
        Employee(id="3", name="Carol", manager_id="1", organization="Y"),
        Employee(id="4", name="Dan", manager_id="99", organization="Y"),
    ]
