import pytest

from lvpager.shiftjis import is_sjis_lead, is_sjis_trail, jis_to_sjis, sjis_to_jis

JIS_RANGE = range(0x21, 0x7F)


def test_lead_byte_ranges():
    assert is_sjis_lead(0x81) and is_sjis_lead(0x9F)
    assert is_sjis_lead(0xE0) and is_sjis_lead(0xFC)
    assert not is_sjis_lead(0x80)
    assert not is_sjis_lead(0xA0)
    assert not is_sjis_lead(0xDF)
    assert not is_sjis_lead(0xFD)
    assert not is_sjis_lead(0x41)


def test_trail_byte_ranges():
    assert is_sjis_trail(0x40) and is_sjis_trail(0x7E)
    assert is_sjis_trail(0x80) and is_sjis_trail(0xFC)
    assert not is_sjis_trail(0x7F)
    assert not is_sjis_trail(0x3F)
    assert not is_sjis_trail(0xFD)


def test_ideographic_space():
    assert sjis_to_jis(0x81, 0x40) == (0x21, 0x21)
    assert jis_to_sjis(0x21, 0x21) == (0x81, 0x40)


def test_hiragana_a():
    assert sjis_to_jis(0x82, 0xA0) == (0x24, 0x22)


def test_round_trip_all_jis_cells():
    for row in JIS_RANGE:
        for cell in JIS_RANGE:
            s1, s2 = jis_to_sjis(row, cell)
            assert is_sjis_lead(s1)
            assert is_sjis_trail(s2)
            assert sjis_to_jis(s1, s2) == (row, cell)


@pytest.mark.parametrize("lead", [0x81, 0x9F, 0xE0, 0xEF])
def test_round_trip_from_sjis(lead):
    for trail in range(0x40, 0xFD):
        if trail == 0x7F:
            continue
        j1, j2 = sjis_to_jis(lead, trail)
        assert j1 in JIS_RANGE and j2 in JIS_RANGE
        assert jis_to_sjis(j1, j2) == (lead, trail)


def test_distinct_codes_map_to_distinct_pairs():
    pairs = {jis_to_sjis(r, c) for r in JIS_RANGE for c in JIS_RANGE}
    assert len(pairs) == len(JIS_RANGE) ** 2