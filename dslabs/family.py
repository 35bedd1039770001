"""Family trees stored as father/wife/son records and kept as a binary tree.

In the tree a man's left child is his wife, and the wife's right chain holds
the sons in record order.
"""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

NAME_WIDTH = 10
_RECORD_SIZE = 3 * NAME_WIDTH


@dataclass(frozen=True)
class FamilyRecord:
    """One father/wife/son entry of the family file."""

    father: str
    wife: str
    son: str


@dataclass(eq=False)
class Person:
    """A node of the family tree."""

    name: str
    left: Optional[Person] = None
    right: Optional[Person] = None


def _build(root: str, records: Sequence[FamilyRecord]) -> Person:
    person = Person(root)
    own = [r for r in records if r.father == root]
    if own:
        wife = Person(own[0].wife)
        person.left = wife
        tail = wife
        for record in own:
            tail.right = _build(record.son, records)
            tail = tail.right
    return person


def build_tree(records: Sequence[FamilyRecord]) -> Person:
    """Build the tree rooted at the father of the first record."""
    if not records:
        raise ValueError("no family records")
    return _build(records[0].father, records)


def to_string(node: Optional[Person]) -> str:
    """Render the tree in bracket notation."""
    if node is None:
        return ""
    if node.left is None and node.right is None:
        return node.name
    right = "," + to_string(node.right) if node.right is not None else ""
    return f"{node.name}({to_string(node.left)}{right})"


def find(node: Optional[Person], name: str) -> Optional[Person]:
    """Return the first person with that name in preorder, or None."""
    if node is None:
        return None
    if node.name == name:
        return node
    return find(node.left, name) or find(node.right, name)


def sons(node: Optional[Person], name: str) -> list[str]:
    """Names of the sons of the named man; KeyError if nobody has that name."""
    father = find(node, name)
    if father is None:
        raise KeyError(name)
    result: list[str] = []
    son = father.left.right if father.left is not None else None
    while son is not None:
        result.append(son.name)
        son = son.right
    return result


def ancestors(node: Optional[Person], name: str) -> list[str]:
    """Names on the tree path from the root down to the named person, excluding them."""
    target = find(node, name)
    if target is None:
        raise KeyError(name)
    path: list[str] = []

    def walk(current: Optional[Person]) -> bool:
        if current is None:
            return False
        if current is target:
            return True
        path.append(current.name)
        if walk(current.left) or walk(current.right):
            return True
        path.pop()
        return False

    walk(node)
    return path


def _encode(name: str) -> bytes:
    raw = name.encode("utf-8")
    if len(raw) > NAME_WIDTH:
        raise ValueError(f"name {name!r} is longer than {NAME_WIDTH} bytes")
    return raw.ljust(NAME_WIDTH, b"\0")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8")


def load_records(path: Union[str, Path]) -> list[FamilyRecord]:
    """Read fixed-width records; a missing file holds no records."""
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        return []
    records = []
    for start in range(0, len(data) - _RECORD_SIZE + 1, _RECORD_SIZE):
        chunk = data[start : start + _RECORD_SIZE]
        fields = [_decode(chunk[k : k + NAME_WIDTH]) for k in range(0, _RECORD_SIZE, NAME_WIDTH)]
        records.append(FamilyRecord(*fields))
    return records


def save_records(path: Union[str, Path], records: Sequence[FamilyRecord]) -> None:
    """Write the records as fixed-width NUL-padded fields."""
    data = b"".join(
        _encode(r.father) + _encode(r.wife) + _encode(r.son) for r in records
    )
    Path(path).write_bytes(data)


class _EndOfInput(Exception):
    pass


class _Input:
    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def word(self, prompt: str = "") -> str:
        if prompt:
            print(prompt, end="", flush=True)
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise _EndOfInput
            self._pending.extend(line.split())
        return self._pending.popleft()

    def choice(self, prompt: str) -> int:
        try:
            return int(self.word(prompt))
        except ValueError:
            return -1


def _print_records(records: Sequence[FamilyRecord]) -> None:
    if not records:
        print("  >>no records")
        return
    print("         father    wife      son")
    print("       ------------------------------")
    for r in records:
        print(f"  {r.father:>10}{r.wife:>10}{r.son:>10}")
    print("       ------------------------------")


def _file_menu(inp: _Input, path: Path, records: list[FamilyRecord]) -> None:
    while True:
        sel = inp.choice(" >1:input 2:list 9:clear 0:save and return, choose:")
        if sel == 9:
            records.clear()
            save_records(path, records)
        elif sel == 1:
            father = inp.word("  >>father, wife and son names:")
            records.append(FamilyRecord(father, inp.word(), inp.word()))
        elif sel == 2:
            _print_records(records)
        elif sel == 0:
            save_records(path, records)
            return


def _tree_menu(inp: _Input, records: list[FamilyRecord]) -> None:
    if not records:
        return
    root = build_tree(records)
    while True:
        sel = inp.choice(" >1:bracket form 2:sons of 3:ancestors of 0:return, choose:")
        if sel == 0:
            return
        if sel == 1:
            print("  >>" + to_string(root))
        elif sel == 2:
            name = inp.word("  >>father's name:")
            father = find(root, name)
            if father is None:
                print(f"  >>no father named {name}!")
            elif father.left is None:
                print(f"  >>{name} has no wife")
            elif not (names := sons(root, name)):
                print(f"  >>{name} has no sons!")
            else:
                print(f"  >>sons of {name}:" + "".join(f"{n:>10}" for n in names))
        elif sel == 3:
            name = inp.word("  >>name:")
            if find(root, name) is None:
                print(f"  >>nobody named {name}")
            else:
                print("  >>all ancestors:" + "".join(f"{n} " for n in ancestors(root, name)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Interactive family-file and family-tree menu; the file path is the optional argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else Path("fam.dat")
    records = load_records(path)
    inp = _Input(sys.stdin)
    try:
        while True:
            sel = inp.choice("*1:file 2:family tree 0:quit, choose:")
            if sel == 0:
                break
            if sel == 1:
                _file_menu(inp, path, records)
            elif sel == 2:
                _tree_menu(inp, records)
    except _EndOfInput:
        print()
    return 0