# neobind/store/binding_store.py
from typing import Dict, List, Optional

from neobind.utils import Binding, format_line, parse_lines


class StoreUnavailable(OSError):
    """The binding file could not be read or written."""


class BindingStore:
    """Storage interface used by the HTTP handlers."""

    def load(self) -> Dict[str, Optional[str]]:
        raise NotImplementedError

    def append(self, neo_address: str, eth_address: str, sign_text: str) -> None:
        raise NotImplementedError

    def search(self, neo_address: str) -> Optional[str]:
        # every lookup re-reads the whole table
        return self.load().get(neo_address)


class CsvBindingStore(BindingStore):
    """
    Flat file store: one 'neo,eth,sign' line per binding.

    The file is expected to exist before the first load; a missing or
    unreadable file raises StoreUnavailable to the caller. Undecodable bytes
    are replaced with U+FFFD so the remaining lines still load. Appends are
    not locked.
    """

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Dict[str, Optional[str]]:
        # newline="" keeps the bytes as written; lines are split on "\n" only
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace", newline="") as f:
                content = f.read()
        except OSError as e:
            raise StoreUnavailable(f"cannot read {self.path}: {e}") from e
        return parse_lines(content)

    def append(self, neo_address: str, eth_address: str, sign_text: str) -> None:
        try:
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                f.write(format_line(neo_address, eth_address, sign_text))
        except OSError as e:
            raise StoreUnavailable(f"cannot append to {self.path}: {e}") from e

    def __repr__(self):
        return f"CsvBindingStore({self.path!r})"


class InMemoryBindingStore(BindingStore):
    """Same line format as CsvBindingStore, kept in a list instead of a file."""

    def __init__(self, bindings: Optional[List[Binding]] = None):
        self.lines: List[str] = []
        for b in bindings or []:
            self.append(*b)

    def load(self) -> Dict[str, Optional[str]]:
        return parse_lines("".join(self.lines))

    def append(self, neo_address: str, eth_address: str, sign_text: str) -> None:
        self.lines.append(format_line(neo_address, eth_address, sign_text))
