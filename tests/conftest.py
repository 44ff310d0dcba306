import pytest
from fastapi.testclient import TestClient

from main import create_app

PROGRAM_OUTPUT = """\
1. Factory Method
Preparing a coffee.
Preparing a tea.

2. Bridge
Preparing a refined coffee.
Adding milk.
Preparing a refined tea.
Adding sugar.

3. Template Method
Boiling water.
Brewing coffee.
Pouring into cup.
Adding sugar and milk.
Boiling water.
Steeping the tea.
Pouring into cup.
Adding lemon.
"""


@pytest.fixture
def program_output():
    return PROGRAM_OUTPUT


@pytest.fixture
def client():
    return TestClient(create_app())
