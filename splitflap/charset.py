"""
CharacterSet - Ordered symbol sets a splitflap cell can cycle through
The first symbol of a set is its blank/fallback symbol.
"""

import string
from typing import Dict, Iterable, Iterator, Tuple, Union


class CharacterSetError(ValueError):
    """Raised when a character set is structurally invalid"""


class CharacterSet:
    """Immutable ordered sequence of unique single-character symbols"""

    def __init__(self, symbols: Union[str, Iterable[str]]):
        symbols = tuple(symbols)
        if not symbols:
            raise CharacterSetError("Character set must contain at least one symbol")

        seen = set()
        for symbol in symbols:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise CharacterSetError(f"Invalid symbol {symbol!r}: symbols must be single characters")
            if symbol in seen:
                raise CharacterSetError(f"Duplicate symbol {symbol!r} in character set")
            seen.add(symbol)

        self._symbols: Tuple[str, ...] = symbols
        self._positions: Dict[str, int] = {symbol: idx for idx, symbol in enumerate(symbols)}

    @property
    def fallback(self) -> str:
        return self._symbols[0]

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    def index(self, symbol: str) -> int:
        """Position of symbol in the set, -1 if it is not a member"""
        return self._positions.get(symbol, -1)

    def next_symbol(self, symbol: str) -> str:
        """Cyclic successor of symbol; non-members advance to the first symbol"""
        return self._symbols[(self.index(symbol) + 1) % len(self._symbols)]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __getitem__(self, idx: int) -> str:
        return self._symbols[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CharacterSet):
            return self._symbols == other._symbols
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"CharacterSet({''.join(self._symbols)!r})"


# Presets
NUMERIC = CharacterSet(string.digits)
ALPHA = CharacterSet(" " + string.ascii_uppercase)
ALPHANUMERIC = CharacterSet(" " + string.ascii_uppercase + string.digits)
PUNCTUATION = CharacterSet(" " + string.ascii_uppercase + string.digits + ".,:;!?'\"-+/()&@#%")

PRESETS: Dict[str, CharacterSet] = {
    "numeric": NUMERIC,
    "alpha": ALPHA,
    "alphanumeric": ALPHANUMERIC,
    "punctuation": PUNCTUATION,
}


def get_preset(name: str) -> CharacterSet:
    """Look up a preset character set by name (case-insensitive)"""
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise CharacterSetError(
            f"Unknown character set preset '{name}'. Available: {', '.join(sorted(PRESETS))}"
        ) from None
