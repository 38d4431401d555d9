import itertools
import pytest

from src.modules.version.comparator import VersionNumber, compare_version
from src.modules.version.errors import InvalidVersionFormat


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestCompareVersion:
    """Test cases for compare_version."""

    def test_equal(self):
        assert compare_version("1.0.0", VersionNumber(1, 0, 0)) == 0

    def test_major_dominates(self):
        assert compare_version("2.0.0", VersionNumber(1, 99, 99)) > 0

    def test_build_breaks_tie(self):
        assert compare_version("1.2.3", VersionNumber(1, 2, 4)) < 0

    def test_minor_dominates_build(self):
        assert compare_version("1.3.0", VersionNumber(1, 2, 99)) > 0
        assert compare_version("1.2.99", VersionNumber(1, 3, 0)) < 0

    def test_matches_tuple_order(self):
        """Test all small triplets against tuple ordering."""
        triplets = list(itertools.product(range(3), repeat=3))
        for candidate, reference in itertools.product(triplets, repeat=2):
            text = ".".join(str(part) for part in candidate)
            expected = sign((candidate > reference) - (candidate < reference))
            assert compare_version(text, VersionNumber(*reference)) == expected

    def test_antisymmetric(self):
        pairs = [("1.2.3", "1.2.4"), ("2.0.0", "1.99.99"), ("0.0.1", "0.0.1"), ("3.1.4", "3.10.0")]
        for left, right in pairs:
            forward = compare_version(left, VersionNumber.parse(right))
            backward = compare_version(right, VersionNumber.parse(left))
            assert sign(forward) == -sign(backward)

    def test_accepts_any_structured_reference(self):
        class BuildInfo:
            major = 4
            minor = 0
            build = 12
            revision = 7  # ignored

        assert compare_version("4.0.12", BuildInfo()) == 0

    @pytest.mark.parametrize("candidate", ["1.2", "1.2.3.4", "1", "", "1..2.3"])
    def test_wrong_part_count(self, candidate):
        with pytest.raises(InvalidVersionFormat) as exc_info:
            compare_version(candidate, VersionNumber(1, 2, 3))
        assert exc_info.value.version == candidate

    @pytest.mark.parametrize("candidate", ["1.2.x", "1..3", "1.2.", "1.2.3a", "1.2.1_0", "1.2.0x1", "\u0661.\u0662.\u0663", "1.2.\uff13"])
    def test_non_integer_component(self, candidate):
        with pytest.raises(InvalidVersionFormat):
            compare_version(candidate, VersionNumber(1, 2, 0))

    def test_error_names_offending_string(self):
        with pytest.raises(InvalidVersionFormat, match="1.2.3.4"):
            compare_version("1.2.3.4", VersionNumber(1, 2, 3))

    def test_leading_zeros(self):
        assert compare_version("01.002.0003", VersionNumber(1, 2, 3)) == 0

    def test_negative_component_is_accepted(self):
        assert compare_version("1.-1.0", VersionNumber(1, 0, 0)) < 0

    def test_surrounding_whitespace_in_component(self):
        assert compare_version(" 1.2.3 ", VersionNumber(1, 2, 3)) == 0


class TestVersionNumber:
    """Test cases for VersionNumber."""

    def test_parse_and_str(self):
        version = VersionNumber.parse("10.4.0")
        assert version == VersionNumber(10, 4, 0)
        assert str(version) == "10.4.0"

    def test_ordering(self):
        assert VersionNumber(2, 0, 0) > VersionNumber(1, 99, 99)
        assert sorted([VersionNumber(1, 2, 3), VersionNumber(1, 0, 9)])[0] == VersionNumber(1, 0, 9)

    def test_parse_rejects_invalid(self):
        with pytest.raises(InvalidVersionFormat):
            VersionNumber.parse("1.2")

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            VersionNumber.parse("a.b.c")
