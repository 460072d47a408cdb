import pytest

from turtlesoup.turtle import SimpleTurtle


@pytest.fixture
def turtle():
    return SimpleTurtle()
