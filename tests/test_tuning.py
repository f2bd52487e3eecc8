import pytest

from chord_fretting.config import ChordInversionTolerance
from chord_fretting.instruments import (
    DEFAULT_INSTRUMENT,
    INSTRUMENTS,
    InstrumentInfo,
    get_instrument,
    instrument_groups,
)
from chord_fretting.tuning import KNOWN_TUNINGS, Tuning, get_tuning, known_tunings


class TestTuning:
    def test_pitch_order_reentrant(self):
        tuning = get_tuning("ukulele", "Soprano Standard")
        assert tuning.pitch_order() == (1, 2, 0, 3)

    def test_pitch_order_linear(self):
        assert get_tuning("guitar", "standard").pitch_order() == (0, 1, 2, 3, 4, 5)

    def test_descriptor(self):
        assert get_tuning("guitar", "Drop D").descriptor() == "D2 A2 D3 G3 B3 E4"

    def test_equals_ignores_name(self):
        tuning = Tuning.of("Mine", "G4", "C4", "E4", "A4")
        assert tuning.equals(get_tuning("ukulele", "soprano standard"))
        assert not tuning.equals(None)

    def test_in_octave_equals(self):
        low_g = get_tuning("ukulele", "low g")
        standard = get_tuning("ukulele", "soprano standard")
        assert low_g.in_octave_equals(standard)
        assert not low_g.equals(standard)

    def test_in_octave_equals_different_string_count(self):
        assert not get_tuning("guitar", "standard").in_octave_equals(get_tuning("ukulele", "baritone"))


class TestTuningRegistry:
    def test_families(self):
        assert set(KNOWN_TUNINGS) == {"guitar", "ukulele", "banjo", "mandolin"}

    def test_known_tunings(self):
        assert "dadgad" in known_tunings("guitar")

    def test_unknown_family_raises(self):
        with pytest.raises(ValueError, match="Unknown instrument family"):
            known_tunings("harp")

    def test_unknown_tuning_raises(self):
        with pytest.raises(ValueError, match="Unknown tuning"):
            get_tuning("guitar", "nashville")

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            KNOWN_TUNINGS["guitar"]["mine"] = Tuning.of("Mine", "E2")


class TestInstruments:
    def test_default_instrument(self):
        assert DEFAULT_INSTRUMENT.key == "guitar-standard"
        assert DEFAULT_INSTRUMENT.string_count == 6

    def test_ukulele_allows_inversions(self):
        info = get_instrument("ukulele-standard")
        assert info.tuning_descriptor == "G4 C4 E4 A4"
        assert info.options.chord_inversion_tolerance is ChordInversionTolerance.ALLOWED
        assert info.options.max_chord_fret_width == 5

    def test_guitar_pins_bass(self):
        assert get_instrument("guitar-drop-d").options.pins_bass

    def test_low_g_not_preferred(self):
        options = get_instrument("ukulele-low-g").options
        assert options.chord_inversion_tolerance is ChordInversionTolerance.NOT_PREFERRED
        assert not options.pins_bass

    def test_unknown_instrument_raises(self):
        with pytest.raises(ValueError, match="Unknown instrument"):
            get_instrument("theorbo")

    def test_all_instruments_have_strings(self):
        for key, info in INSTRUMENTS.items():
            assert info.key == key
            assert info.string_count >= 4

    def test_groups_common_only(self):
        groups = instrument_groups(common_only=True)
        keys = {info.key for infos in groups.values() for info in infos}
        assert "guitar-standard" in keys
        assert "guitar-drop-c" not in keys
        assert list(groups)[0] == "Guitar"

    def test_custom(self):
        info = InstrumentInfo.custom(Tuning.of(None, "E2", "E3", "E4"))
        assert info.key == "custom"
        assert info.name == "E2 E3 E4"
