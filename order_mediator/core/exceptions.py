class CoordinationError(Exception):
    """Base class for every error raised by the coordination core"""
    pass


class NotBoundError(CoordinationError):
    """A component was mutated before a coordinator was bound to it"""
    pass


class AlreadyBoundError(CoordinationError):
    """A component is already owned by another coordinator"""
    pass


class UnknownEventKindError(CoordinationError):
    """The event is outside the fixed set or has no reaction"""
    pass


class UnregisteredComponentError(CoordinationError):
    """The sender is not one of the coordinator's components"""
    pass


class ReentrantDispatchError(CoordinationError):
    """A notification arrived while a reaction was still running"""
    pass


class DeliveryLockedError(CoordinationError):
    """A delivery component was mutated while self-pickup is active"""
    pass
