import functools
import typing

import pytest
from kungfu import Error, Ok

from jsarray import ELEMENTWISE, FOLD, Category, ResultTypeError, Shape, ShapeError, resolve, resolve_or_raise


def value_only(x: int) -> int:
    return x


def value_index(x: int, i: int) -> int:
    return x + i


def value_index_view(x: int, i: int, view: typing.Sequence[int]) -> int:
    return x + i + len(view)


def is_positive(x: int) -> bool:
    return x > 0


class Scale:
    def __init__(self, factor: int) -> None:
        self.factor = factor

    def __call__(self, x: int, i: int) -> int:
        return x * self.factor + i

    def apply(self, x: int) -> int:
        return x * self.factor


def shape_of(callback, category=ELEMENTWISE, **kwargs) -> Shape:
    match resolve(callback, category, **kwargs):
        case Ok(shape):
            return shape
        case Error(error):
            raise AssertionError(f"unexpected rejection: {error}")


def rejection(callback, category=ELEMENTWISE, **kwargs) -> ShapeError:
    match resolve(callback, category, **kwargs):
        case Ok(shape):
            raise AssertionError(f"unexpected shape: {shape}")
        case Error(error):
            return error


# ============================================================================
# Elementwise arity
# ============================================================================


@pytest.mark.parametrize(
    ("callback", "arity"),
    [
        (value_only, 1),
        (value_index, 2),
        (value_index_view, 3),
        (lambda x: x, 1),
        (lambda x, i: x, 2),
        (lambda x, i, view: x, 3),
    ],
)
def test_plain_functions_and_lambdas(callback, arity):
    assert shape_of(callback).arity == arity


def test_closure_capturing_local_state():
    offset = 10

    def shifted(x, i):
        return x + offset + i

    assert shape_of(shifted).arity == 2


def test_callable_object_drops_self():
    shape = shape_of(Scale(3))
    assert shape.arity == 2
    assert shape.returns is int


def test_bound_method():
    assert shape_of(Scale(2).apply).arity == 1


def test_partial_consumes_bound_arguments():
    assert shape_of(functools.partial(value_index_view, 1)).arity == 2


def test_defaulted_positional_parameters_count():
    def with_default(x, i=0):
        return x + i

    assert shape_of(with_default).arity == 2


def test_optional_keyword_only_parameters_are_ignored():
    def tagged(x, *, tag="t", **extra):
        return (tag, x)

    assert shape_of(tagged).arity == 1


@pytest.mark.parametrize("callback", [lambda: 0, lambda a, b, c, d: 0])
def test_elementwise_arity_out_of_range(callback):
    error = rejection(callback)
    assert error.category == "elementwise"
    assert "value, index, view" in str(error)
    assert error.arity in (0, 4)


def test_variadic_callback_is_rejected():
    error = rejection(lambda *args: args[0])
    assert "*args" in error.reason
    assert "arity=" in error.reason


def test_required_keyword_only_is_rejected():
    def needs_flag(x, *, flag):
        return x

    assert "flag" in rejection(needs_flag).reason


def test_non_callable_is_rejected():
    error = rejection(42)
    assert "not callable" in error.reason
    assert error.callback == 42


# ============================================================================
# Fold arity
# ============================================================================


@pytest.mark.parametrize(
    ("callback", "arity"),
    [
        (lambda acc, x: acc, 2),
        (lambda acc, x, i: acc, 3),
        (lambda acc, x, i, view: acc, 4),
    ],
)
def test_fold_arity(callback, arity):
    assert shape_of(callback, FOLD).arity == arity


@pytest.mark.parametrize("callback", [lambda acc: acc, lambda a, b, c, d, e: a])
def test_fold_arity_out_of_range(callback):
    error = rejection(callback, FOLD)
    assert error.category == "fold"
    assert "acc, value, index, view" in str(error)


# ============================================================================
# Explicit arity
# ============================================================================


def test_explicit_arity_admits_variadic_callback():
    shape = shape_of(lambda *args: sum(args), arity=2)
    assert shape.arity == 2


def test_explicit_arity_keeps_declared_return():
    assert shape_of(is_positive, arity=1).returns is bool


@pytest.mark.parametrize("arity", [0, 4, True, "2"])
def test_explicit_arity_is_validated(arity):
    assert isinstance(rejection(value_only, arity=arity), ShapeError)


def test_resolve_or_raise_raises_carried_error():
    with pytest.raises(ShapeError, match="takes 0 positional parameter"):
        resolve_or_raise(lambda: 0, ELEMENTWISE)


def test_shape_error_is_a_type_error():
    with pytest.raises(TypeError):
        resolve_or_raise(lambda a, b, c, d: 0, ELEMENTWISE)


# ============================================================================
# Declared result types
# ============================================================================


def test_undeclared_return_is_any():
    assert shape_of(lambda x: x).returns is typing.Any


def test_string_annotations_are_evaluated():
    def predicate(x: "int") -> "bool":
        return bool(x)

    assert shape_of(predicate).returns is bool


def test_require_boolean_accepts_bool_any_and_type_guards():
    def guard(x: object) -> typing.TypeGuard[int]:
        return isinstance(x, int)

    for callback in (is_positive, lambda x: x, guard):
        shape_of(callback).require_boolean(callback, "filter")


def test_require_boolean_rejects_declared_non_bool():
    with pytest.raises(ResultTypeError, match=r"filter\(\) needs a callback returning bool") as info:
        shape_of(value_only).require_boolean(value_only, "filter")
    assert info.value.returns is int
    assert info.value.operation == "filter"


def test_require_element_rejects_never():
    def explode(x: int) -> typing.NoReturn:
        raise RuntimeError(x)

    with pytest.raises(ResultTypeError):
        shape_of(explode).require_element(explode, "map")


# ============================================================================
# Descriptor and category
# ============================================================================


def test_category_ranges():
    assert (ELEMENTWISE.min_arity, ELEMENTWISE.max_arity) == (1, 3)
    assert (FOLD.min_arity, FOLD.max_arity) == (2, 4)


def test_category_validation():
    with pytest.raises(ValueError):
        Category(name="broken", min_arity=0, shapes=("x",))
    with pytest.raises(ValueError):
        Category(name="broken", min_arity=1, shapes=())


def test_shape_rejects_illegal_arity():
    with pytest.raises(ValueError):
        Shape(ELEMENTWISE, 4)
    with pytest.raises(ValueError):
        Shape(FOLD, 1)


def test_shape_flags():
    assert not Shape(ELEMENTWISE, 1).wants_index
    assert Shape(ELEMENTWISE, 2).wants_index and not Shape(ELEMENTWISE, 2).wants_view
    assert Shape(FOLD, 4).wants_view


def test_bind_forwards_exactly_arity_arguments():
    calls = []
    view = [7, 8]

    def record(*args):
        calls.append(args)

    Shape(ELEMENTWISE, 1).bind(record, view)(7, 0)
    Shape(ELEMENTWISE, 2).bind(record, view)(7, 0)
    Shape(ELEMENTWISE, 3).bind(record, view)(8, 1)
    Shape(FOLD, 2).bind(record, view)("acc", 7, 0)
    Shape(FOLD, 3).bind(record, view)("acc", 7, 0)
    Shape(FOLD, 4).bind(record, view)("acc", 8, 1)

    assert calls == [(7,), (7, 0), (8, 1, view), ("acc", 7), ("acc", 7, 0), ("acc", 8, 1, view)]
