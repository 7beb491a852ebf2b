"""
Property-based tests using Hypothesis.

These tests generate record sets and receipt text to check the invariants
of history derivation and number extraction hold for any input.
"""

import math

from hypothesis import given, settings, strategies as st

from fueltrack.calculations.history import derive_history
from fueltrack.utils.number_extractor import NumberExtractor


finite_or_junk = st.one_of(
    st.floats(min_value=-1e6, max_value=1e7, allow_nan=False),
    st.integers(min_value=-1000, max_value=10_000_000),
    st.integers(),
    st.just(10 ** 400),
    st.just(float('nan')),
    st.none(),
    st.text(alphabet='abcxyz ', max_size=5),
)


@st.composite
def records(draw, odometer=None, fuel_amount=None, min_size=0, max_size=20):
    odometer = odometer if odometer is not None else st.floats(min_value=0, max_value=1e7, allow_nan=False)
    fuel_amount = fuel_amount if fuel_amount is not None else st.floats(min_value=0.1, max_value=200, allow_nan=False)
    count = draw(st.integers(min_value=min_size, max_value=max_size))
    return [
        {
            'id': i,
            'date': '2024-01-01T00:00:00+00:00',
            'odometer': draw(odometer),
            'fuel_amount': draw(fuel_amount),
            'price': draw(st.floats(min_value=0, max_value=1e5, allow_nan=False)),
            'station': '',
        }
        for i in range(count)
    ]


# ============================================================================
# History Property Tests
# ============================================================================

class TestDeriveHistoryProperties:
    """Property-based tests for derive_history."""

    @given(records())
    def test_history_is_permutation_of_input(self, recs):
        """Property: every input record appears exactly once in the history."""
        history = derive_history(recs)['history']
        assert sorted(r['id'] for r in history) == sorted(r['id'] for r in recs)

    @given(records(min_size=1))
    def test_sorted_descending_and_last_is_zero(self, recs):
        """Property: highest odometer first, earliest fill-up has mileage 0."""
        history = derive_history(recs)['history']

        odometers = [r['odometer'] for r in history]
        assert odometers == sorted(odometers, reverse=True)
        assert history[0]['odometer'] == max(r['odometer'] for r in recs)
        assert history[-1]['mileage'] == 0
        assert history[-1]['distance'] == 0

    @given(records(
        odometer=finite_or_junk,
        fuel_amount=finite_or_junk,
    ))
    @settings(max_examples=200)
    def test_mileage_never_negative(self, recs):
        """Property: mileage >= 0, and 0 whenever distance or fuel is not positive."""
        for record in derive_history(recs)['history']:
            assert record['mileage'] >= 0
            assert not math.isnan(record['mileage'])

            fuel = record['fuel_amount']
            fuel_positive = isinstance(fuel, (int, float)) and not isinstance(fuel, bool) and fuel > 0
            if record['distance'] <= 0 or not fuel_positive:
                assert record['mileage'] == 0

    @given(records())
    def test_stats_only_with_two_records(self, recs):
        """Property: stats is None exactly when there are fewer than 2 records."""
        stats = derive_history(recs)['stats']
        assert (stats is None) == (len(recs) < 2)

    @given(records(min_size=2))
    def test_average_between_min_and_max_positive_mileage(self, recs):
        """Property: avg_mileage lies within the range of positive mileages."""
        result = derive_history(recs)
        positive = [r['mileage'] for r in result['history'] if r['mileage'] > 0]

        if positive:
            assert min(positive) - 0.051 <= result['stats']['avg_mileage'] <= max(positive) + 0.051
        else:
            assert result['stats']['avg_mileage'] == 0

    @given(records(odometer=finite_or_junk, fuel_amount=finite_or_junk))
    def test_idempotent(self, recs):
        """Property: deriving twice from the same snapshot gives the same result."""
        first = derive_history(recs)
        second = derive_history(recs)
        assert repr(first) == repr(second)


# ============================================================================
# Number Extraction Property Tests
# ============================================================================

class TestNumberExtractorProperties:
    """Property-based tests for NumberExtractor.extract."""

    @given(st.text(max_size=200))
    def test_arbitrary_text_does_not_crash(self, text):
        """Property: any text yields a list of positive numeric strings."""
        result = NumberExtractor.extract(text)

        assert isinstance(result, list)
        for candidate in result:
            assert ',' not in candidate
            assert float(candidate) > 0

    @given(st.text(max_size=200))
    def test_no_duplicates(self, text):
        result = NumberExtractor.extract(text)
        assert len(result) == len(set(result))

    @given(st.text(max_size=200))
    def test_ranked_descending(self, text):
        values = [float(c) for c in NumberExtractor.extract(text)]
        assert values == sorted(values, reverse=True)

    @given(st.lists(st.integers(min_value=1, max_value=10_000_000), max_size=10))
    def test_finds_every_positive_integer(self, numbers):
        """Property: integers written with thousands separators are all recovered."""
        text = ' | '.join(f'{n:,}' for n in numbers)
        result = NumberExtractor.extract(text)
        assert sorted(result, key=int) == sorted({str(n) for n in numbers}, key=int)

    @given(st.text(max_size=200))
    def test_idempotent(self, text):
        assert NumberExtractor.extract(text) == NumberExtractor.extract(text)
