"""
Combine independently optional fields with map + apply.

Run: python examples/applicative_form.py
"""
from maybepy import from_nullable, map, apply, curry, lift, get_or_else


def greeting(title, first, last):
    return f"Dear {title} {first} {last}"


def main():
    params = {"title": "Dr.", "first": "Ada", "last": "Lovelace"}
    get = lambda k: from_nullable(params.get(k))

    # map the curried function into the first field, then apply the rest
    g = apply(apply(map(curry(greeting), get("title")), get("first")), get("last"))
    print(get_or_else("Dear customer", g))

    # same thing with lift, missing "middle" only matters if asked for
    g2 = lift(greeting)(get("title"), get("middle"), get("last"))
    print(get_or_else("Dear customer", g2))


if __name__ == "__main__":
    main()
