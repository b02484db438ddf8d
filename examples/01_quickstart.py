from __future__ import annotations

from kungfu import Nothing, Some

from jsarray import JSArray, ShapeError


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


class Scaler:
    """Call-operator object with captured state."""

    def __init__(self, factor: int) -> None:
        self.factor = factor

    def __call__(self, value: int, index: int) -> int:
        return value * self.factor + index


def main() -> None:
    banner("01_quickstart: shapes + folds + sort")

    s = JSArray.of(3, 1, 2)

    # Same operation, three callback shapes
    print(s.map(lambda x: x * 2))
    print(s.map(lambda v, i: (i, v)))
    print(s.map(lambda v, i, view: v / sum(view)))
    print(s.map(Scaler(10)))

    print(s.filter(lambda x: x > 1))
    print(s.reduce(lambda acc, x: acc + x, 0))
    print(s.reduce_right(lambda acc, v, i: acc + [i], []))

    match s.find(lambda x: x > 2):
        case Some(value):
            print(f"found {value}")
        case Nothing():
            print("not found")

    print(s.to_sorted(lambda a, b: a > b), s)
    print(s.sort(), s)

    # Variadic callbacks need a pinned shape
    try:
        s.map(lambda *args: args)
    except ShapeError as e:
        print(f"error: {e}")
    print(s.map(lambda *args: args, arity=2))


if __name__ == "__main__":
    main()
