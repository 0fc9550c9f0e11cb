"""
Shared pytest configuration for OmniCLI tests.
"""

import asyncio
import pytest
from unittest.mock import Mock

from omnicli import Command, Suggestion, create_cli
from omnicli.config.models import OmniCLIConfig


def build_suggestions(size: int, stem: str = "item"):
    return [
        Suggestion(content=f"{stem}-{i}", description=f"Item {i}")
        for i in range(size)
    ]


@pytest.fixture
def actions():
    """Mock actions keyed by command name."""
    return {
        "human": Mock(return_value=None),
        "say": Mock(return_value=None),
        "hello": Mock(return_value=None),
        "list": Mock(return_value=None),
    }


@pytest.fixture
def sample_commands(actions):
    """human -> say (s) -> hello (h), plus list (ls) with 30 async suggestions."""
    hello = Command(
        name="hello",
        aliases=["h"],
        description="greet someone",
        action=actions["hello"],
        suggestion_provider=lambda args: [
            Suggestion(content=name, description=f"Say hello to {name}")
            for name in ("Alice", "Bob")
        ],
    )
    say = Command(
        name="say",
        aliases=["s"],
        action=actions["say"],
        subcommands=[hello],
    )
    human = Command(
        name="human",
        description="do things a human can do",
        action=actions["human"],
        subcommands=[say],
    )

    async def list_items(args):
        await asyncio.sleep(0)
        return build_suggestions(30)

    listing = Command(
        name="list",
        aliases=["ls"],
        action=actions["list"],
        suggestion_provider=list_items,
    )
    return [human, listing]


@pytest.fixture
def config():
    return OmniCLIConfig()


@pytest.fixture
def cli(sample_commands):
    return create_cli(sample_commands)


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
