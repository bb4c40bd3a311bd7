"""Callable pallet functions and routing of calls to them."""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, TypeVar

from palletchain.support import DispatchError

_CALL_ARGS = "_pallet_call_args"
_CALLER_NAMES = frozenset({"caller", "_caller"})
_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08

F = TypeVar("F", bound=Callable[..., Any])


class CallDefinitionError(TypeError):
    """Raised when a function marked as a pallet call has an invalid signature."""


@dataclass(frozen=True)
class Call:
    """A request to run the pallet call ``name`` with the given named arguments."""

    name: str
    args: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", dict(self.args))


def _not_named(name: str) -> CallDefinitionError:
    return CallDefinitionError(
        f"Invalid pallet call, argument {name!r} must be a named parameter"
    )


def _has_default(name: str) -> CallDefinitionError:
    return CallDefinitionError(
        f"Invalid pallet call, argument {name!r} must not have a default"
    )


def call(func: F) -> F:
    """Mark a pallet method as callable from the outside.

    The method must take ``self`` first and ``caller`` (or ``_caller``)
    second; every further parameter must be named and without a default.
    """
    if not isinstance(func, types.FunctionType):
        raise CallDefinitionError("Invalid pallet call, expected a plain function")

    code = func.__code__
    n_positional = code.co_argcount
    n_keyword = code.co_kwonlyargcount
    varnames = code.co_varnames
    positional = varnames[:n_positional]
    keyword_only = varnames[n_positional:n_positional + n_keyword]
    has_varargs = bool(code.co_flags & _CO_VARARGS)
    has_varkw = bool(code.co_flags & _CO_VARKEYWORDS)

    if not positional or positional[0] != "self":
        raise CallDefinitionError(
            "Invalid call, first argument must be a variant of self"
        )
    if len(positional) < 2:
        raise CallDefinitionError(
            "Invalid call, second argument should be `caller`"
        )
    if positional[1] not in _CALLER_NAMES:
        raise CallDefinitionError(
            "Invalid name for second parameter: expected `caller`"
        )

    first_defaulted = n_positional - len(func.__defaults__ or ())
    kw_defaults = func.__kwdefaults__ or {}
    extra_index = n_positional + n_keyword

    names = []
    for index, name in enumerate(positional[2:], start=2):
        if index >= first_defaulted:
            raise _has_default(name)
        names.append(name)
    if has_varargs:
        raise _not_named(varnames[extra_index])
    for name in keyword_only:
        if name in kw_defaults:
            raise _has_default(name)
        names.append(name)
    if has_varkw:
        raise _not_named(varnames[extra_index])

    setattr(func, _CALL_ARGS, tuple(names))
    return func


class CallablePallet:
    """Base class for pallets whose ``@call`` methods can be dispatched."""

    _calls: ClassVar[dict[str, tuple[str, ...]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        calls: dict[str, tuple[str, ...]] = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                args = getattr(member, _CALL_ARGS, None)
                if args is not None:
                    calls[name] = args
                elif name in calls:
                    # Overridden by a method that is not a call.
                    del calls[name]
        cls._calls = calls

    @classmethod
    def calls(cls) -> dict[str, tuple[str, ...]]:
        """Return each callable function name with its argument names."""
        return dict(cls._calls)

    def dispatch(self, caller: Any, call: Call) -> None:
        """Run ``call`` on behalf of ``caller``; raise DispatchError on failure."""
        expected = self._calls.get(call.name)
        if expected is None:
            raise DispatchError(f"unknown call: {call.name}")
        if set(call.args) != set(expected):
            raise DispatchError(f"invalid arguments for call: {call.name}")
        getattr(self, call.name)(caller, **call.args)