"""Errors for virtual row call resolution."""


class VirtualRowError(Exception):
    """Base exception for virtual row resolution failures."""


class InvalidQualifiedName(VirtualRowError):
    """Raised when a name cannot be split into identifier segments."""


class InvalidFunctionArgs(VirtualRowError):
    """Raised when function call arguments do not match a call shape."""


class InvalidOperatorArity(VirtualRowError):
    """Raised when an operator shortcut receives the wrong operand count."""


class InvalidWindowSpec(VirtualRowError):
    """Raised when window options contain unknown or conflicting keys."""


class InvalidExpression(VirtualRowError):
    """Raised when a collected value is not an expression node."""


class CallSyntaxError(VirtualRowError):
    """Raised when call text cannot be parsed."""
