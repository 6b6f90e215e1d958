"""
Coordination core: the component base class, the coordinator (mediator), its
dispatch states, default reactions and error types.
"""

from .component import Component
from .exceptions import (
    AlreadyBoundError,
    CoordinationError,
    DeliveryLockedError,
    NotBoundError,
    ReentrantDispatchError,
    UnknownEventKindError,
    UnregisteredComponentError,
)
from .mediator import Coordinator
from .reactions import DEFAULT_REACTIONS, Reaction
from .state import State, IdleState, DispatchingState

__all__ = [
    'Component',
    'Coordinator',
    'DEFAULT_REACTIONS',
    'Reaction',
    'State',
    'IdleState',
    'DispatchingState',
    'CoordinationError',
    'NotBoundError',
    'AlreadyBoundError',
    'UnknownEventKindError',
    'UnregisteredComponentError',
    'ReentrantDispatchError',
    'DeliveryLockedError',
]
