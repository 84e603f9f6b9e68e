'''Random web-safe ids: BASE62 strings and zero padded numeric strings.
The generated ids are not guaranteed to be unique.'''
import random
import itertools
from typing import Optional


BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"


class idgen:
    '''Generates a random id composed of [0-9A-Za-z] characters by default,
    or [0-9] characters only when numeric is set'''
    len: int

    _composition: list[str]
    _cdomain: list[str]
    _rng: random.Random
    def __init__(self,
                 len: int,
                 numeric: bool = False,
                 rng: Optional[random.Random] = None) -> None:
        _check_length(len)
        self.len = len
        self._rng = rng if rng is not None else random
        if numeric:
            self._composition = ["0-9"]
        else:
            self._composition = [
                "0-9",
                "A-Z",
                "a-z"
            ]
        self._set_character_domain()

    def generate(self) -> str:
        I_min = 0
        I_max = len(self._cdomain) - 1
        # randint includes both bounds
        return "".join(
            self._cdomain[self._rng.randint(I_min, I_max)] for _ in range(self.len)
        )


    def _set_character_domain(self) -> None:
        domain = []
        for comp in self._composition:
            domain.append(
                [ chr(x) for x in range( ord(comp[0]), ord(comp[-1]) + 1) ]
            )
        self._cdomain = [ x for x in itertools.chain(*domain) ]


def _check_length(length: int) -> None:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError("length must be non-negative")


def generate_alphanumeric(length: int, rng: Optional[random.Random] = None) -> str:
    '''
    Random BASE62 string of exactly `length` characters, e.g. "bWk9D" for 5.

    Arguments:
        length (int): number of characters, 0 gives an empty string.
        rng: source providing randint(a, b); defaults to the shared `random` generator.

    Returns:
        the generated id
    '''
    return idgen(length, rng=rng).generate()


def generate_padded_numeric(length: int, rng: Optional[random.Random] = None) -> str:
    '''
    Random decimal string of exactly `length` digits, leading zeros kept, e.g. "00396" for 5.
    The result is text; do not expect it to fit a fixed width integer.
    '''
    return idgen(length, numeric=True, rng=rng).generate()


if __name__ == "__main__":
    id = idgen(20)
    print(id.generate())
