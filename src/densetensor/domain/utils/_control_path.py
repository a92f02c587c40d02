"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on an object's runtime state.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the configured state attribute of `self` and
  dispatches to the registered implementation that matches it.

Important notes
---------------
- The first time you decorate a control path, the original method name on the
  class is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Implementations are called like instance methods: `sub_method(self, ...)`.
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

TrapException = Optional[Union[Exception, Callable[[Callable[..., Any], Any], None]]]


def create_path_builder(state_attr: str = "_state") -> Callable[
    [Type, Callable[P, R], Hashable, TrapException],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control
    paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            mode = "A"
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass.foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `self.mode`.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute (usually a property) read from `self` to select
        the control path. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control
        path and replaces `cls.method` with a dispatcher wrapper.
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
    """Mapping from (class, method, state) keys to registered implementations."""

    _MISSING = object()

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: TrapException = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
        method : Callable[P, R]
            The base method being templated. Its metadata (name, docstring,
            annotations) is copied onto the installed wrapper.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[Union[Exception, Callable]]
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises `trap_exception()`.
            - If a callable, it is invoked as `trap_exception(method, state)`
              before raising `trap_exception()`.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator registering `sub_method` for `(cls, method, state)`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            ) from None

        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur_state = getattr(self, state_attr, _MISSING)
                if cur_state is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {} (@property)".format(
                            type(self), repr(state_attr)
                        )
                    )
                key = MethodKey(cls.__name__, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if not trap_exception:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(method.__name__)
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
