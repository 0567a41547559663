"""An interactive command interpreter for exercising a binary search tree."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO

from algolab import bst

_PROG = "algolab-bst"
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class _Command:
    code: str
    action: Optional[Callable[["BstShell", list[str]], None]]
    arg_hint: str
    help_msg: str


class BstShell:
    """Runs BST commands one line at a time, writing results to ``out``."""

    def __init__(self, out: Optional[TextIO] = None, echo: bool = False) -> None:
        self._out = out
        self.echo = echo
        self.tree: Optional[bst.Node] = None

    @property
    def out(self) -> TextIO:
        """The stream results are written to."""
        return self._out if self._out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)

    def execute(self, line: str) -> bool:
        """Run one command line; return False once the user asks to quit."""
        words = line.split()
        if not words:
            return True
        name, args = words[0], words[1:]
        if name == "?":
            self._show_help()
            return True
        if name == "q":
            return False
        command = _COMMANDS.get(name)
        if command is None or command.action is None:
            self._write(f"Unknown command '{name}'\n")
            return True
        command.action(self, args)
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and run each line until the input ends or a quit command."""
        for line in lines:
            self._write("> ")
            if self.echo:
                self._write(line if line.endswith("\n") else line + "\n")
            if not self.execute(line):
                return
        self._write("> ")

    # Helpers

    def _show_help(self) -> None:
        rows = [
            f"{c.code:>5} {c.arg_hint:<18} {c.help_msg}\n" for c in _COMMANDS.values()
        ]
        self._write("Commands:\n" + "".join(rows) + "\n")

    def _usage(self, code: str) -> None:
        self._write(f"Usage: {code} {_COMMANDS[code].arg_hint}\n")

    def _parse_ints(self, words: Sequence[str]) -> Optional[list[int]]:
        for word in words:
            if not _INTEGER_PATTERN.fullmatch(word):
                self._write(f"Error: Invalid value '{word}'\n")
                return None
        return [int(word) for word in words]

    # Commands

    def _insert(self, args: list[str]) -> None:
        if not args:
            self._usage("+")
            return
        values = self._parse_ints(args)
        if values is None:
            return
        for value in values:
            self.tree = bst.insert(self.tree, value)
            self._write(f"Inserted {value}\n")

    def _delete(self, args: list[str]) -> None:
        if len(args) != 1:
            self._usage("-")
            return
        values = self._parse_ints(args)
        if values is None:
            return
        self.tree = bst.delete(self.tree, values[0])
        self._write(f"Deleted {values[0]}\n")

    def _find(self, args: list[str]) -> None:
        if len(args) != 1:
            self._usage("f")
            return
        values = self._parse_ints(args)
        if values is None:
            return
        found = bst.search(self.tree, values[0])
        self._write(f"{values[0]} is{'' if found else ' not'} in the BST\n")

    def _print(self, args: list[str]) -> None:
        if args:
            self._usage("p")
            return
        self._write(bst.render(self.tree))

    def _size(self, args: list[str]) -> None:
        if args:
            self._usage("s")
            return
        count = bst.size(self.tree)
        self._write(f"The BST contains {count} {'node' if count == 1 else 'nodes'}\n")

    def _height(self, args: list[str]) -> None:
        if args:
            self._usage("h")
            return
        self._write(f"The height of the BST is {bst.height(self.tree)}\n")

    def _prune(self, args: list[str]) -> None:
        if len(args) != 2:
            self._usage("r")
            return
        values = self._parse_ints(args)
        if values is None:
            return
        lo, hi = values
        self.tree = bst.prune(self.tree, lo, hi)
        self._write(f"Pruned values outside of [{lo}, {hi}]\n")

    def _traversal(self, code: str, title: str, values: Callable[[], list[int]],
                   args: list[str]) -> None:
        if args:
            self._usage(code)
            return
        self._write(f"{title} traversal: " + "".join(f"{v} " for v in values()) + "\n")

    def _in_order(self, args: list[str]) -> None:
        self._traversal("I", "In-order", lambda: bst.in_order(self.tree), args)

    def _pre_order(self, args: list[str]) -> None:
        self._traversal("P", "Pre-order", lambda: bst.pre_order(self.tree), args)

    def _post_order(self, args: list[str]) -> None:
        self._traversal("O", "Post-order", lambda: bst.post_order(self.tree), args)


_COMMANDS: dict[str, _Command] = {
    c.code: c
    for c in (
        _Command("+", BstShell._insert, "<num>...", "insert values in the given order"),
        _Command("-", BstShell._delete, "<num>", "delete a value"),
        _Command("f", BstShell._find, "<num>", "check if a value is in the BST"),
        _Command("p", BstShell._print, "", "print the BST"),
        _Command("s", BstShell._size, "", "get the size of the BST"),
        _Command("h", BstShell._height, "", "get the height of the BST"),
        _Command("r", BstShell._prune, "<lo> <hi>", "remove values outside of [lo, hi]"),
        _Command("I", BstShell._in_order, "",
                 "print the in-order traversal of the BST"),
        _Command("P", BstShell._pre_order, "",
                 "print the pre-order traversal of the BST"),
        _Command("O", BstShell._post_order, "",
                 "print the post-order traversal of the BST"),
        _Command("?", None, "", "show this message"),
        _Command("q", None, "", "quit"),
    )
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive BST tester on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    echo = False
    for arg in args:
        if arg == "-h":
            print(
                f"Usage: {_PROG} [options]...\n"
                "Options:\n"
                "    -h      show this help message\n"
                "    -e      echo - echo all commands"
            )
            return 0
        if arg == "-e":
            echo = True

    print("Interactive BST Tester")
    print("Enter ? to see the list of commands.")
    BstShell(echo=echo).run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())