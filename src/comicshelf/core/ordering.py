# ABOUTME: Natural ordering for archive entry names and comic filenames.
# ABOUTME: Case- and accent-insensitive, with embedded numbers compared by value.

import unicodedata

from natsort import natsort_keygen, ns


def fold_name(name: str) -> str:
    """Fold a name to its base letters: strip accents, then casefold.

    "Café" and "CAFE" fold to the same string, so only base letters
    (and numeric values) decide the ordering.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


# Numeric runs are unsigned integers: "page-1" is not negative one.
natural_sort_key = natsort_keygen(key=fold_name, alg=ns.INT | ns.UNSIGNED)


def compare_names(a: str, b: str) -> int:
    """Three-way comparison of two names under natural ordering.

    Returns a negative number if a sorts first, positive if b does,
    and 0 when the names differ only by case or accents.

    >>> compare_names("page9.jpg", "page10.jpg") < 0
    True
    """
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)
