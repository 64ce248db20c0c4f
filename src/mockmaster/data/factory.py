"""
MockMaster Data Factories

Define entity blueprints once, build as many test entities as needed.

A definition maps field names to either static values or callables taking
a FactoryContext. Callables run at build time, in definition order.

Example:
    users = define_factory('user', {
        'id': lambda ctx: ctx.sequence('userId'),
        'name': lambda ctx: fake.name(),
        'role': 'member',
    }, traits={'admin': {'role': 'admin'}})

    build(users)                                # {'id': 1, 'name': ..., 'role': 'member'}
    build(users, trait='admin')                 # {'id': 2, ..., 'role': 'admin'}
    build_list(users, 3, overrides={'name': 'X'})
"""

from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field

from ..common.errors import UnknownTraitError
from .sequences import SequenceStore

Definition = Dict[str, Any]


@dataclass(frozen=True)
class FactoryContext:
    """Context handed to callable field definitions."""

    sequences: SequenceStore

    def sequence(self, name: Optional[str] = None) -> int:
        """Next value of a named sequence ('default' when unnamed)."""
        return self.sequences.next(name)


@dataclass(frozen=True)
class Factory:
    """A named entity blueprint with optional traits."""

    name: str
    definition: Definition
    traits: Dict[str, Definition] = field(default_factory=dict)
    sequences: SequenceStore = field(default_factory=SequenceStore, compare=False)


def define_factory(
    name: str,
    definition: Definition,
    traits: Optional[Dict[str, Definition]] = None,
    sequences: Optional[SequenceStore] = None
) -> Factory:
    """
    Define a factory.

    Args:
        name: Factory name
        definition: Field name -> static value or callable(ctx)
        traits: Named partial definitions layered over the base definition
        sequences: Sequence store to draw from; factories sharing a store
            share their named sequences. A new store is created if omitted.

    Returns:
        Factory
    """
    return Factory(
        name=name,
        definition=dict(definition),
        traits={k: dict(v) for k, v in (traits or {}).items()},
        sequences=sequences if sequences is not None else SequenceStore()
    )


def _evaluate(value: Any, context: FactoryContext) -> Any:
    if callable(value):
        return value(context)
    return value


def build(
    factory: Factory,
    overrides: Optional[Dict[str, Any]] = None,
    trait: Optional[str] = None,
    sequences: Optional[SequenceStore] = None
) -> Dict[str, Any]:
    """
    Build one entity.

    Args:
        factory: Factory to build from
        overrides: Final values replacing built fields (not evaluated)
        trait: Name of a trait to layer over the base definition
        sequences: Sequence store overriding the factory's own

    Returns:
        Built entity as a dict

    Raises:
        UnknownTraitError: If the trait is not defined on the factory
    """
    definition = factory.definition
    if trait is not None:
        if trait not in factory.traits:
            raise UnknownTraitError(factory.name, trait)
        definition = {**definition, **factory.traits[trait]}

    context = FactoryContext(sequences=sequences if sequences is not None else factory.sequences)
    result = {key: _evaluate(value, context) for key, value in definition.items()}

    if overrides:
        result.update(overrides)

    return result


def build_list(
    factory: Factory,
    count: int,
    overrides: Optional[Dict[str, Any]] = None,
    trait: Optional[str] = None,
    sequences: Optional[SequenceStore] = None
) -> List[Dict[str, Any]]:
    """Build `count` entities with the same options."""
    return [
        build(factory, overrides=overrides, trait=trait, sequences=sequences)
        for _ in range(count)
    ]
