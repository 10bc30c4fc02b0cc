#!/usr/bin/env python3
# Description: Pick a record by its text and print its id

from dataclasses import dataclass

from dmenu_facade import DMenu


@dataclass
class Entry:
    id: int
    text: str

    def __str__(self) -> str:
        return self.text


def main():
    items = [Entry(0, "Hello"), Entry(1, "World"), Entry(2, "!")]

    chosen = DMenu().vertical_with_lines(2).execute_consume(items)
    if chosen is not None:
        print(chosen.id)


if __name__ == "__main__":
    main()
