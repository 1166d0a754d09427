# ABOUTME: Unit tests for natural ordering of archive entry names.
# ABOUTME: Validates numeric-run comparison, case and accent folding, and the comparator contract.

from functools import cmp_to_key

from comicshelf.core.ordering import compare_names, fold_name, natural_sort_key


class TestFoldName:
    """Tests for fold_name."""

    def test_lowercases(self) -> None:
        """Case differences are removed."""
        assert fold_name("PAGE01.JPG") == "page01.jpg"

    def test_strips_accents(self) -> None:
        """Accented letters fold to their base letter."""
        assert fold_name("Café") == "cafe"


class TestNaturalSortKey:
    """Tests for sorting with natural_sort_key."""

    def test_numeric_runs_sort_by_value(self) -> None:
        """page10 sorts after page9 and page2."""
        names = ["page2.jpg", "page10.jpg", "page1.jpg"]
        assert sorted(names, key=natural_sort_key) == ["page1.jpg", "page2.jpg", "page10.jpg"]

    def test_zero_padded_and_unpadded_interleave(self) -> None:
        """Zero padding does not change numeric ordering."""
        names = ["p010.png", "p9.png", "p001.png"]
        assert sorted(names, key=natural_sort_key) == ["p001.png", "p9.png", "p010.png"]

    def test_case_insensitive(self) -> None:
        """Uppercase names do not all sort before lowercase ones."""
        names = ["b.jpg", "A.jpg", "C.jpg"]
        assert sorted(names, key=natural_sort_key) == ["A.jpg", "b.jpg", "C.jpg"]

    def test_directory_prefixes_sort_naturally(self) -> None:
        """Numbers inside directory names are compared by value too."""
        names = ["ch10/01.jpg", "ch2/01.jpg", "ch1/02.jpg", "ch1/01.jpg"]
        assert sorted(names, key=natural_sort_key) == [
            "ch1/01.jpg",
            "ch1/02.jpg",
            "ch2/01.jpg",
            "ch10/01.jpg",
        ]

    def test_hyphen_is_not_a_minus_sign(self) -> None:
        """'page-2' sorts after 'page-1' rather than before it."""
        names = ["page-2.jpg", "page-1.jpg"]
        assert sorted(names, key=natural_sort_key) == ["page-1.jpg", "page-2.jpg"]


class TestCompareNames:
    """Tests for the three-way compare_names comparator."""

    def test_smaller_number_is_negative(self) -> None:
        assert compare_names("page9.jpg", "page10.jpg") < 0

    def test_larger_number_is_positive(self) -> None:
        assert compare_names("page10.jpg", "page9.jpg") > 0

    def test_case_only_difference_is_equal(self) -> None:
        """Names differing only by case compare equal."""
        assert compare_names("Cover.JPG", "cover.jpg") == 0

    def test_accent_only_difference_is_equal(self) -> None:
        assert compare_names("Épisode 1", "episode 1") == 0

    def test_usable_with_cmp_to_key(self) -> None:
        """The comparator produces the same order as the key function."""
        names = ["Page 11.png", "page 3.png", "PAGE 20.png", "page 1.png"]
        by_cmp = sorted(names, key=cmp_to_key(compare_names))
        assert by_cmp == sorted(names, key=natural_sort_key)
        assert by_cmp == ["page 1.png", "page 3.png", "Page 11.png", "PAGE 20.png"]
