"""
HTTP headers multi-map.

Backed by ``multidict.CIMultiDict``, the structure aiohttp uses for headers:
insertion order is preserved, a name may carry several values and lookups
ignore case.
"""
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from multidict import CIMultiDict, CIMultiDictProxy

HeaderItems = Iterable[Tuple[str, str]]


class HttpHeaders:
    """
    Ordered, case-insensitive header multi-map.

    ``add`` never overwrites: adding a value under an existing name keeps
    the earlier values. Instances returned by ``frozen()`` are read-only.

    Example:
        >>> headers = HttpHeaders()
        >>> headers.add('Accept', 'text/html').add('Accept', 'application/json')
        >>> headers.get_all('accept')
        ['text/html', 'application/json']
    """

    def __init__(self, items: Optional[Union['HttpHeaders', HeaderItems]] = None):
        """
        Initialize headers.

        Args:
            items: Another HttpHeaders or an iterable of (name, value) pairs
        """
        if isinstance(items, HttpHeaders):
            items = items.items()
        self._headers: Union[CIMultiDict, CIMultiDictProxy] = CIMultiDict(items or ())
        self._read_only = False

    @property
    def read_only(self) -> bool:
        return self._read_only

    def add(self, name: str, value: str) -> 'HttpHeaders':
        """
        Append a value under name, keeping existing values.

        Raises:
            TypeError: If headers are read-only or name/value are not strings
        """
        self._check_writable()
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError(
                f"Header name and value must be str, got {type(name).__name__}"
                f" and {type(value).__name__}"
            )
        if not name:
            raise ValueError("Header name must not be empty")
        self._headers.add(name, value)
        return self

    def set(self, name: str, value: str) -> 'HttpHeaders':
        """Replace all values under name with a single value."""
        self._check_writable()
        self._headers[name] = value
        return self

    def remove(self, name: str) -> 'HttpHeaders':
        """Remove every value under name (no-op if absent)."""
        self._check_writable()
        self._headers.popall(name, None)
        return self

    def get_first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the first value under name."""
        return self._headers.get(name, default)

    def get_all(self, name: str) -> List[str]:
        """Get all values under name in insertion order."""
        return list(self._headers.getall(name, []))

    def names(self) -> List[str]:
        """Distinct header names in first-insertion order."""
        seen = set()
        names = []
        for name in self._headers.keys():
            folded = name.lower()
            if folded not in seen:
                seen.add(folded)
                names.append(name)
        return names

    def items(self) -> List[Tuple[str, str]]:
        """All (name, value) pairs in insertion order, duplicates included."""
        return list(self._headers.items())

    def to_single_value_dict(self, separator: str = ', ') -> Dict[str, str]:
        """
        Collapse duplicate names into one comma-joined value.

        For clients that accept a single value per header name.
        """
        return {name: separator.join(self.get_all(name)) for name in self.names()}

    def to_multidict(self) -> CIMultiDictProxy:
        """Read-only multidict view for clients that accept one."""
        return CIMultiDictProxy(CIMultiDict(self._headers))

    def copy(self) -> 'HttpHeaders':
        """Writable copy."""
        return HttpHeaders(self.items())

    def frozen(self) -> 'HttpHeaders':
        """Read-only snapshot; later changes to self do not affect it."""
        snapshot = HttpHeaders()
        snapshot._headers = CIMultiDictProxy(CIMultiDict(self._headers))
        snapshot._read_only = True
        return snapshot

    def _check_writable(self):
        if self._read_only:
            raise TypeError("HttpHeaders is read-only")

    def __contains__(self, name: object) -> bool:
        return name in self._headers

    def __getitem__(self, name: str) -> List[str]:
        values = self.get_all(name)
        if not values:
            raise KeyError(name)
        return values

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpHeaders):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"HttpHeaders({self.items()!r})"
