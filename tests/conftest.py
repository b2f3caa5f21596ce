"""Shared pytest fixtures for staticreflect tests."""

import os

import pytest
from dotenv import load_dotenv
from hypothesis import settings

from staticreflect.ast import PhpParser
from staticreflect.core.config import StaticReflectConfig
from staticreflect.reflector import Reflector

# Load environment variables from .env file
load_dotenv()

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def config() -> StaticReflectConfig:
    """Provide a default configuration that ignores the environment."""
    return StaticReflectConfig(_env_file=None)


@pytest.fixture
def php_parser(config: StaticReflectConfig) -> PhpParser:
    return PhpParser(config)


@pytest.fixture
def reflector(config: StaticReflectConfig) -> Reflector:
    return Reflector(config=config)
