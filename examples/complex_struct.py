#!/usr/bin/env python3
# Description: Show richer records by name and print the one picked

from dataclasses import dataclass, field

from dmenu_facade import DMenu


@dataclass
class Complex:
    id: int
    name: str
    active: bool
    values: list[int] = field(default_factory=list)


def main():
    items = [
        Complex(id=1, name="Complex thingy", active=False),
        Complex(id=2, name="Somewhat Complex", active=True),
    ]

    chosen = (
        DMenu()
        .vertical_with_lines(5)
        .with_font("FiraCodeNerdFont:size=13")
        .execute(items, render=lambda c: c.name)
    )
    print(chosen)


if __name__ == "__main__":
    main()
