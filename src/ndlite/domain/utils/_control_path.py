"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module routes a single public method call to one of several registered
implementations based on the value of a named attribute on the receiver.

Core idea
---------
- A *base* method is declared on a class; its signature and docstring become
  the canonical ones.
- Implementations ("control paths") are registered for that method, each keyed
  by ``(ClassName, MethodName, StateVal)``.
- At runtime the installed wrapper reads ``getattr(self, state_attribute)`` and
  calls the implementation registered for that value as ``impl(self, ...)``.

In ndlite the state is an array's ``reduction_strategy``: ``sum()`` is declared
once and the sequential and parallel paths register themselves against it.

Important notes
---------------
- The first registration replaces ``cls.<method>`` with the dispatching wrapper.
- Registered implementations live in a closure-local mapping owned by one
  `create_path_builder()` call. Different builders do not share mappings.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

_MISSING = object()


def create_path_builder(
    state_attribute: str = "_state",
) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a "path builder" that registers control paths keyed on an attribute.

    Usage::

        strategy_paths = create_path_builder("mode")

        class Worker:
            mode = "fast"
            def run(self, x): ...

        @strategy_paths(Worker, Worker.run, "fast")
        def run_fast(self, x): ...

        @strategy_paths(Worker, Worker.run, "safe")
        def run_safe(self, x): ...

    Parameters
    ----------
    state_attribute : str, optional
        Name of the attribute (usually a property) read from the receiver to
        select an implementation. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Exception, Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers one control path.

        Parameters
        ----------
        cls : Type
            Class whose method is replaced by the dispatching wrapper.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            wrapper with `functools.wraps`.
        state : Hashable
            State value that selects the decorated implementation.
        trap_exception : optional
            Behavior when no implementation matches the receiver's state:

            - ``None``: raise `NotImplementedError`.
            - an exception class: raise ``trap_exception()``.
            - a callable: call ``trap_exception(method, state)`` first, then
              raise ``trap_exception()``.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        smk = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur_state = getattr(self, state_attribute, _MISSING)
                if cur_state is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {} (@property)".format(
                            type(self), repr(state_attribute)
                        )
                    )
                key = MethodKey(cls.__name__, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if not trap_exception:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(method)
                        )
                    )
                if callable(trap_exception) and not isinstance(
                    trap_exception, type
                ):
                    trap_exception(method, cur_state)
                raise trap_exception()

            setattr(cls, method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
