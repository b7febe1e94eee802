"""
Random Façade Tests

Tests derived operations: full-entropy integers, seeding from text and bytes,
floats, ranges, choice and shuffle.
"""

import hashlib
import logging
from collections import Counter

import pytest

from detrand import (
    EmptyInputError,
    GaloisLfsr,
    Generator,
    GeneratorKind,
    InvalidStateError,
    Random,
    RandomConfig,
    RandomError,
    RangeError,
    XorShift128Plus,
)
from detrand.core.config import Settings
from detrand import random as random_module


# =============================================================================
# Construction Tests
# =============================================================================


class TestConstruction:
    """Tests for building Random instances."""

    def test_default_generator(self):
        """Test xorshift128+ is used when no generator is given."""
        rng = Random(1)
        assert isinstance(rng.generator, XorShift128Plus)

    def test_explicit_generator(self):
        """Test a given generator is owned and seeded."""
        gen = GaloisLfsr()
        rng = Random(42, gen)

        assert rng.generator is gen
        assert gen.seed == 42

    def test_system_seed_when_omitted(self, monkeypatch):
        """Test a missing seed comes from system entropy."""
        monkeypatch.setattr(random_module, "system_seed", lambda *args: 777)

        rng = Random()

        assert rng.seed == 777

    def test_matches_bare_generator(self):
        """Test next_int passes straight through to the generator."""
        rng = Random(42)
        gen = XorShift128Plus(42)

        assert [rng.next_int() for _ in range(10)] == [gen.next_int() for _ in range(10)]

    def test_from_config(self):
        """Test building from RandomConfig."""
        rng = Random.from_config(RandomConfig(seed=42, generator=GeneratorKind.LFSR))

        assert isinstance(rng.generator, GaloisLfsr)
        assert rng.seed == 42

    def test_from_settings(self):
        """Test building from explicit settings."""
        rng = Random.from_settings(Settings(seed=5, generator="lfsr"))

        assert isinstance(rng.generator, GaloisLfsr)
        assert rng.seed == 5

    def test_from_settings_env(self, monkeypatch):
        """Test building from DETRAND_* environment variables."""
        monkeypatch.setenv("DETRAND_SEED", "42")

        rng = Random.from_settings()

        assert rng.seed == 42
        assert rng.next_int() == 1101320914

    def test_from_settings_without_seed(self, monkeypatch):
        """Test settings without a seed use system entropy."""
        calls = []

        def fake_seed(rounds):
            calls.append(rounds)
            return 9

        monkeypatch.setattr(random_module, "system_seed", fake_seed)

        rng = Random.from_settings(Settings(entropy_fallback_rounds=12))

        assert rng.seed == 9
        assert calls == [12]

    def test_from_config_passes_fallback_rounds(self, monkeypatch):
        """Test from_config hands entropy_fallback_rounds to system_seed."""
        calls = []

        def fake_seed(*args):
            calls.append(args)
            return 4

        monkeypatch.setattr(random_module, "system_seed", fake_seed)

        rng = Random.from_config(RandomConfig(), entropy_fallback_rounds=3)

        assert rng.seed == 4
        assert calls == [(3,)]

    def test_repr(self):
        """Test repr names seed and generator class."""
        assert repr(Random(3)) == "Random(seed=3, generator=XorShift128Plus)"

    def test_custom_generator_without_name(self, caplog):
        """Test a contract-only generator works without a registry name."""

        class CountingGenerator(Generator):
            def __init__(self):
                self._seed = 0
                self._count = 0

            @property
            def seed(self):
                return self._seed

            @seed.setter
            def seed(self, value):
                self._seed = value
                self._count = value

            @property
            def state(self):
                return self._count.to_bytes(8, "little")

            @state.setter
            def state(self, value):
                self._count = int.from_bytes(value, "little")

            @property
            def uses_all_bits(self):
                return True

            def next_int(self):
                self._count += 1
                return self._count

        rng = Random(10, CountingGenerator())

        with caplog.at_level(logging.DEBUG, logger="detrand.random"):
            rng.seed = 20

        assert repr(rng) == "Random(seed=20, generator=CountingGenerator)"
        assert "Seeding CountingGenerator with 20" in caplog.text
        assert rng.next_int() == 21


# =============================================================================
# Seed and State Tests
# =============================================================================


class TestSeedAndState:
    """Tests for seed/state delegation and derived seeding."""

    def test_seed_setter_delegates(self, rng):
        """Test setting the seed re-keys the generator."""
        rng.seed = 42
        assert rng.generator.seed == 42
        assert rng.next_int() == 1101320914

    def test_same_seed_same_operations(self):
        """Test determinism across a mix of operations."""

        def run(rng):
            items = list(range(20))
            rng.shuffle(items)
            return [
                rng.random(),
                rng.random_int(-10, 10),
                rng.uniform(2.5, 3.5),
                rng.choice("abcdef"),
                rng.next_full_int(),
                items,
            ]

        assert run(Random(31337)) == run(Random(31337))
        assert run(Random(31337, GaloisLfsr())) == run(Random(31337, GaloisLfsr()))

    def test_state_round_trip(self, rng):
        """Test capturing and restoring state replays derived values."""
        saved = rng.state
        expected = [rng.random() for _ in range(20)]

        rng.state = saved

        assert [rng.random() for _ in range(20)] == expected

    def test_invalid_state_surfaces(self, rng):
        """Test InvalidStateError from the generator reaches the caller."""
        with pytest.raises(InvalidStateError):
            rng.state = b"short"

    def test_string_seed_reference(self, rng):
        """Test the documented 'hello world!' seed."""
        rng.set_string_seed("hello world!")
        assert rng.seed == 17087790592628558915

    def test_string_seed_matches_sha1(self, rng):
        """Test string seeding is SHA-1 of UTF-8, first 8 bytes little-endian."""
        text = "päivää, 世界"
        digest = hashlib.sha1(text.encode("utf-8")).digest()

        rng.set_string_seed(text)

        assert rng.seed == int.from_bytes(digest[:8], "little")

    def test_bytes_seed_matches_string_seed(self):
        """Test bytes and string seeding agree."""
        a = Random(0)
        b = Random(0)

        a.set_string_seed("level-1")
        b.set_bytes_seed(b"level-1")

        assert a.seed == b.seed
        assert a.next_int() == b.next_int()

    def test_uses_all_bits_delegates(self, rng, lfsr_rng):
        """Test uses_all_bits reflects the generator."""
        assert rng.uses_all_bits is True
        assert lfsr_rng.uses_all_bits is False


# =============================================================================
# Integer Tests
# =============================================================================


class TestIntegers:
    """Tests for next_full_int and random_int."""

    def test_full_int_passthrough(self):
        """Test next_full_int is a passthrough when all bits are used."""
        rng = Random(42)
        assert [rng.next_full_int() for _ in range(3)] == [1101320914, -295674645, -425731082]

    def test_full_int_mixes_two_draws(self, lfsr_rng):
        """Test next_full_int XORs a draw with the next one rotated by 16 bits."""
        # Raw LFSR draws for seed 42 are 21 and 0x80200009
        assert lfsr_rng.next_full_int() == 21 ^ 0x00098020

    def test_full_int_consumes_two_draws(self, lfsr_rng):
        """Test the mixed path advances the generator twice."""
        reference = GaloisLfsr(42)

        lfsr_rng.next_full_int()
        reference.next_int()
        reference.next_int()

        assert lfsr_rng.state == reference.state

    def test_full_int_bit_coverage(self, lfsr_rng):
        """Test no bit of next_full_int is stuck at 0 or 1."""
        seen_ones = 0
        seen_zeros = 0
        for _ in range(1000):
            value = lfsr_rng.next_full_int() & 0xFFFFFFFF
            seen_ones |= value
            seen_zeros |= ~value & 0xFFFFFFFF

        assert seen_ones == 0xFFFFFFFF
        assert seen_zeros == 0xFFFFFFFF

    def test_full_int_is_signed_32_bit(self, lfsr_rng):
        """Test mixed output stays in the signed 32-bit range."""
        for _ in range(1000):
            assert -(2**31) <= lfsr_rng.next_full_int() < 2**31

    def test_random_int_reference(self, rng):
        """Test dice rolls for seed 42."""
        assert [rng.random_int(1, 6) for _ in range(5)] == [1, 6, 1, 3, 2]

    def test_random_int_bounds(self, generator_class):
        """Test random_int never leaves [lower, upper]."""
        rng = Random(42, generator_class())

        for lower, upper in [(0, 0), (5, 10), (-3, 3), (-100, -90), (0, 2**40)]:
            for _ in range(200):
                assert lower <= rng.random_int(lower, upper) <= upper

    def test_random_int_single_value(self, rng):
        """Test a one-value range always returns that value."""
        assert all(rng.random_int(7, 7) == 7 for _ in range(50))

    def test_random_int_hits_both_ends(self, rng):
        """Test both inclusive endpoints occur."""
        values = {rng.random_int(0, 3) for _ in range(500)}
        assert values == {0, 1, 2, 3}

    def test_random_int_uniform(self, generator_class):
        """Test random_int is roughly uniform (chi-square, 9 dof, p=0.001)."""
        rng = Random(12345, generator_class())
        draws = 10_000
        counts = Counter(rng.random_int(0, 9) for _ in range(draws))

        expected = draws / 10
        chi_square = sum((counts[k] - expected) ** 2 / expected for k in range(10))

        assert chi_square < 27.88

    def test_random_int_reversed_range_fails(self, rng):
        """Test lower > upper raises RangeError."""
        with pytest.raises(RangeError):
            rng.random_int(10, 5)

    def test_range_error_is_value_error(self, rng):
        """Test RangeError can be caught as ValueError or RandomError."""
        with pytest.raises(ValueError):
            rng.random_int(1, 0)
        with pytest.raises(RandomError):
            rng.random_int(1, 0)


# =============================================================================
# Float Tests
# =============================================================================


class TestFloats:
    """Tests for random, uniform and random_bool."""

    def test_random_reference(self, rng):
        """Test the first float for seed 42 is exact."""
        assert rng.random() == 1357703291100395 / 2**53

    def test_random_range(self, generator_class):
        """Test random() is in [0, 1)."""
        rng = Random(99, generator_class())
        for _ in range(5000):
            assert 0.0 <= rng.random() < 1.0

    def test_random_53_bit_resolution(self, rng):
        """Test values are multiples of 2**-53."""
        for _ in range(100):
            scaled = rng.random() * 2**53
            assert scaled == int(scaled)

    def test_uniform_half_open(self, rng):
        """Test uniform() stays in [lower, upper)."""
        for _ in range(10_000):
            value = rng.uniform(-5.0, 5.0)
            assert -5.0 <= value < 5.0

    def test_uniform_degenerate_range(self, rng):
        """Test an empty range returns lower."""
        assert rng.uniform(2.0, 2.0) == 2.0

    def test_random_bool_extremes(self, rng):
        """Test probability 0 never and 1 always returns True."""
        assert not any(rng.random_bool(0.0) for _ in range(100))
        assert all(rng.random_bool(1.0) for _ in range(100))

    def test_random_bool_invalid_probability(self, rng):
        """Test probability outside [0, 1] raises RangeError."""
        with pytest.raises(RangeError):
            rng.random_bool(1.5)
        with pytest.raises(RangeError):
            rng.random_bool(-0.1)


# =============================================================================
# Sequence Tests
# =============================================================================


class TestSequences:
    """Tests for choice and shuffle."""

    def test_choice_reference(self):
        """Test choice for seed 7."""
        assert Random(7).choice(["a", "b", "c"]) == "b"

    def test_choice_member(self, rng):
        """Test choice returns an element of the sequence."""
        items = ("x", "y", "z")
        assert all(rng.choice(items) in items for _ in range(100))

    def test_choice_single(self, rng):
        """Test choice from one element."""
        assert rng.choice([42]) == 42

    def test_choice_empty_fails(self, rng):
        """Test choice from an empty sequence raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            rng.choice([])

    def test_choice_empty_is_index_error(self, rng):
        """Test EmptyInputError can be caught as IndexError."""
        with pytest.raises(IndexError):
            rng.choice("")

    def test_shuffle_reference(self):
        """Test shuffle for seed 7."""
        items = ["a", "b", "c", "d"]
        Random(7).shuffle(items)
        assert items == ["b", "a", "d", "c"]

    def test_shuffle_is_permutation(self, generator_class):
        """Test shuffle keeps the same multiset."""
        rng = Random(2024, generator_class())
        original = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 55]

        for _ in range(50):
            items = list(original)
            rng.shuffle(items)
            assert Counter(items) == Counter(original)

    def test_shuffle_returns_none(self, rng):
        """Test shuffle mutates in place."""
        items = [1, 2, 3]
        assert rng.shuffle(items) is None

    def test_shuffle_short_is_noop(self, rng):
        """Test shuffling length 0 and 1 changes nothing and draws nothing."""
        saved = rng.state
        empty = []
        single = ["only"]

        rng.shuffle(empty)
        rng.shuffle(single)

        assert empty == []
        assert single == ["only"]
        assert rng.state == saved

    def test_shuffle_reaches_all_permutations(self, rng):
        """Test every ordering of three items appears."""
        seen = set()
        for _ in range(300):
            items = [1, 2, 3]
            rng.shuffle(items)
            seen.add(tuple(items))

        assert len(seen) == 6
