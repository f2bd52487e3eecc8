from chord_fretting import chord_type, interval
from chord_fretting.models import Chord
from chord_fretting.pitch_class import NoteName


def note_names(chord):
    return [str(n) for n in chord.get_notes()]


class TestChordNotes:
    def test_major_triad(self):
        assert note_names(Chord.of("C", chord_type.MAJOR_TRIAD)) == ["C", "E", "G"]

    def test_flat_spelling(self):
        assert note_names(Chord.of("Eb", chord_type.MINOR_TRIAD)) == ["Eb", "Gb", "Bb"]

    def test_extended_chord_order(self):
        chord = Chord.of("C", chord_type.DOMINANT_THIRTEENTH)
        assert note_names(chord) == ["C", "E", "G", "Bb", "D", "F", "A"]

    def test_tones_carry_intervals(self):
        tones = Chord.of("C", chord_type.DOMINANT_NINTH).get_chord_tones()
        assert [t.interval for t in tones] == [interval.P1, interval.M3, interval.P5, interval.m7, interval.M9]


class TestSlashChords:
    def test_bass_is_chord_tone(self):
        chord = Chord.of("C", chord_type.MAJOR_TRIAD, bass="E")
        assert note_names(chord) == ["E", "C", "G"]
        assert chord.get_chord_tones()[0].interval == interval.M3

    def test_seventh_in_bass(self):
        chord = Chord.of("C", chord_type.DOMINANT_SEVENTH, bass="Bb")
        assert note_names(chord) == ["Bb", "C", "E", "G"]

    def test_enharmonic_bass_is_folded(self):
        chord = Chord.of("C#", chord_type.MAJOR_TRIAD, bass="Ab")
        assert note_names(chord) == ["Ab", "C#", "E#"]

    def test_bass_outside_chord(self):
        chord = Chord.of("C", chord_type.MAJOR_TRIAD, bass="D")
        tones = chord.get_chord_tones()
        assert note_names(chord) == ["D", "C", "E", "G"]
        assert tones[0].is_bass_only

    def test_bass_equal_to_root_is_not_distinct(self):
        chord = Chord.of("C", chord_type.MAJOR_TRIAD, bass="C")
        assert not chord.has_distinct_bass
        assert note_names(chord) == ["C", "E", "G"]


class TestChordStr:
    def test_plain(self):
        assert str(Chord.of("F#", chord_type.MINOR_SEVENTH_CHORD)) == "F#m7"

    def test_slash(self):
        assert str(Chord.of("C", chord_type.MAJOR_TRIAD, bass="E")) == "C/E"

    def test_explicit_name(self):
        chord = Chord(NoteName.parse("C"), chord_type.MAJOR_TRIAD, name="C major")
        assert str(chord) == "C major"
