#!/usr/bin/env python3
"""AliasCraft demo — register, hook, group and chain aliases in code.

Usage:
    python demo_registry.py
"""

from __future__ import annotations

from aliascraft import AliasArityError, AliasNotFoundError, AliasRegistry


def main() -> None:
    registry = AliasRegistry()

    @registry.alias("greet", group="demo", args=["name"])
    def greet(name: str) -> str:
        return f"Hello, {name}!"

    registry.register("farewell", lambda name: f"Goodbye, {name}!", group="demo", args=["name"])

    @registry.register_pre_hook
    def default_name(alias_name: str, args: list) -> None:
        if not args:
            args.append("stranger")

    calls: list[str] = []
    registry.register_post_hook(lambda alias_name, args, result: calls.append(alias_name))

    print(registry.run("greet", "Alice"))
    print(registry.run("greet"))  # the pre-hook supplies the missing name

    both = registry.chain("greet", "farewell")
    print(both("Bob"))

    registry.change_group("farewell", "polite")
    print("demo group:", sorted(registry.get_aliases_by_group("demo")))
    print("polite group:", sorted(registry.get_aliases_by_group("polite")))

    try:
        registry.run("missing")
    except AliasNotFoundError as e:
        print("error:", e)

    registry.register("pair", lambda a, b: (a, b), args=["a", "b"])
    try:
        registry.run("pair", "only-one")
    except AliasArityError as e:
        print("error:", e)

    print("post-hook saw:", calls)


if __name__ == "__main__":
    main()
