import unittest

from densetensor.domain.utils._control_path import create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder()

    def test_state_must_be_hashable(self) -> None:
        class C:
            @property
            def _state(self):
                return "A"

            def foo(self, x: int) -> int:
                return x

        with self.assertRaises(TypeError) as ctx:
            # list is unhashable
            self.decorator(C, C.foo, state=["not-hashable"])(lambda self, x: x)

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                # base implementation never used once wrapper installed
                return -999

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, state="B")
        def foo_B(self, x: int) -> int:
            return x + 20

        a = C("A")
        b = C("B")
        self.assertEqual(a.foo(1), 11)
        self.assertEqual(b.foo(1), 21)

    def test_control_path_receives_instance(self) -> None:
        class C:
            def __init__(self, st, base):
                self.__st = st
                self.base = base

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return self.base + x

        self.assertEqual(C("A", 100).foo(5), 105)

    def test_custom_state_attribute_name(self) -> None:
        decorator = create_path_builder("mode")

        class C:
            def __init__(self, mode):
                self.mode = mode

            def foo(self) -> str:
                return "base"

        @decorator(C, C.foo, state="fast")
        def foo_fast(self) -> str:
            return "fast"

        @decorator(C, C.foo, state="safe")
        def foo_safe(self) -> str:
            return "safe"

        self.assertEqual(C("fast").foo(), "fast")
        self.assertEqual(C("safe").foo(), "safe")

    def test_dispatch_supports_none_state(self) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return -999

        @self.decorator(C, C.foo, state=None)
        def foo_none(self, x: int) -> int:
            return x * 2

        c = C(None)
        self.assertEqual(c.foo(3), 6)

    def test_missing_state_property_raises_not_implemented(self) -> None:
        class C:
            # No _state property on purpose
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 1

        obj = C()
        with self.assertRaises(NotImplementedError) as ctx:
            obj.foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'_state'", str(ctx.exception))

    def test_missing_control_path_without_trap_exception_raises_not_implemented(
        self,
    ) -> None:
        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 1

        obj = C("B")  # no registered path
        with self.assertRaises(NotImplementedError) as ctx:
            obj.foo(1)

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("state='B'", str(ctx.exception))

    def test_trap_exception_as_exception_class_raises_that_exception(self) -> None:
        class MissingPathError(Exception):
            pass

        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, state="A", trap_exception=MissingPathError)
        def foo_A(self, x: int) -> int:
            return x + 1

        obj = C("B")
        with self.assertRaises(MissingPathError):
            obj.foo(1)

    def test_trap_exception_callable_is_called_and_then_raised(self) -> None:
        class MyRaisedError(Exception):
            pass

        calls = {"count": 0, "method_name": None, "state": None}

        class TrapFactory:
            def __call__(self, *args):
                if len(args) == 2:
                    # side-effect call: (method, state)
                    calls["count"] += 1
                    calls["method_name"] = getattr(args[0], "__name__", None)
                    calls["state"] = args[1]
                    return None
                # no-arg call: must return exception instance
                return MyRaisedError("boom")

        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, state="A", trap_exception=TrapFactory())
        def foo_A(self, x: int) -> int:
            return x + 1

        obj = C("B")
        with self.assertRaises(MyRaisedError) as ctx:
            obj.foo(123)

        self.assertEqual(calls["count"], 1)
        self.assertEqual(calls["method_name"], "foo")
        self.assertEqual(calls["state"], "B")
        self.assertIn("boom", str(ctx.exception))

    def test_wrapper_preserves_original_method_metadata(self) -> None:
        class C:
            @property
            def _state(self):
                return "A"

            def foo(self, x: int) -> int:
                """Original foo docstring."""
                return x

        @self.decorator(C, C.foo, state="A")
        def foo_A(self, x: int) -> int:
            return x + 1

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Original foo docstring.")

    def test_two_builders_do_not_share_control_paths(self) -> None:
        deco1 = create_path_builder()
        deco2 = create_path_builder()

        class C:
            def __init__(self, st):
                self.__st = st

            @property
            def _state(self):
                return self.__st

            def foo(self, x: int) -> int:
                return -999

        @deco1(C, C.foo, state="A")
        def foo_A_1(self, x: int) -> int:
            return 111

        # Now overwrite wrapper with deco2 installation
        @deco2(C, C.foo, state="B")
        def foo_B_2(self, x: int) -> int:
            return 222

        a = C("A")
        b = C("B")

        with self.assertRaises(NotImplementedError):
            a.foo(0)

        self.assertEqual(b.foo(0), 222)


if __name__ == "__main__":
    unittest.main()
