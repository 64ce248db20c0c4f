"""
MockMaster Data Module

Test data generation.

This module provides:
- Faker-backed fake data helpers
- Entity factories with traits and named sequences
- Injectable sequence stores
"""

from .fakes import FakeData, fake, set_seed, reset_seed
from .sequences import SequenceStore, DEFAULT_SEQUENCE
from .factory import Factory, FactoryContext, define_factory, build, build_list

__all__ = [
    # Fake data
    'FakeData',
    'fake',
    'set_seed',
    'reset_seed',

    # Sequences
    'SequenceStore',
    'DEFAULT_SEQUENCE',

    # Factories
    'Factory',
    'FactoryContext',
    'define_factory',
    'build',
    'build_list',
]
