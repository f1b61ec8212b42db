"""Tests for cue synthesis and the sound manager."""

import io
import wave

import numpy as np
import pytest

from hiit.audio.sounds import (
    CUES, SAMPLE_RATE, SOUND_NAMES, SoundManager, Tone, _envelope,
    render_cue, render_tone,
)


class TestSynthesis:

    @pytest.mark.parametrize("name", SOUND_NAMES)
    def test_cue_is_parseable_wav(self, name):
        data = render_cue(CUES[name])
        assert data[:4] == b"RIFF"
        with wave.open(io.BytesIO(data), "rb") as wf:
            assert wf.getnchannels() == 1
            assert wf.getsampwidth() == 2
            assert wf.getframerate() == SAMPLE_RATE
            assert wf.getnframes() > 0

    def test_envelope_matches_length(self):
        tone = Tone(440.0, 0.1, attack=0.2, decay=0.2, release=0.2)
        n = int(SAMPLE_RATE * tone.duration)
        env = _envelope(n, tone)
        assert len(env) == n
        assert env.max() <= 1.0

    def test_tone_includes_gap(self):
        tone = Tone(440.0, 0.1, gap_after=0.05)
        samples = render_tone(tone)
        assert len(samples) == int(SAMPLE_RATE * 0.1) + int(SAMPLE_RATE * 0.05)
        assert np.all(samples[-int(SAMPLE_RATE * 0.05):] == 0)

    def test_samples_stay_in_range(self):
        loud = (Tone(440.0, 0.05, amplitude=1.0, overtone=1.0),)
        data = render_cue(loud)
        with wave.open(io.BytesIO(data), "rb") as wf:
            pcm = np.frombuffer(wf.readframes(wf.getnframes()), dtype=np.int16)
        assert pcm.max() <= 32767
        assert pcm.min() >= -32767

    def test_expected_cues(self):
        assert set(SOUND_NAMES) == {
            "exercise_start", "rest_start", "countdown", "workout_complete", "click",
        }


@pytest.mark.usefixtures("qapp")
class TestSoundManager:

    def test_wav_files_generated(self, tmp_path):
        SoundManager(parent=None, sounds_dir=tmp_path)
        for name in SOUND_NAMES:
            path = tmp_path / f"{name}.wav"
            assert path.exists(), f"Missing WAV: {name}"
            assert path.stat().st_size > 100

    def test_existing_files_are_kept(self, tmp_path):
        marker = tmp_path / "click.wav"
        marker.write_bytes(b"cached")
        SoundManager(parent=None, sounds_dir=tmp_path)
        assert marker.read_bytes() == b"cached"

    def test_all_cues_loaded(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        assert set(mgr._effects) == set(SOUND_NAMES)

    @pytest.mark.parametrize("level,expected", [(30, 30), (200, 100), (-10, 0)])
    def test_set_volume_clamps(self, tmp_path, level, expected):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_volume(level)
        assert mgr.volume == expected

    def test_set_enabled(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        assert mgr.enabled is False

    def test_play_unknown_name_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.play("nonexistent_sound")

    def test_play_while_disabled_no_crash(self, tmp_path):
        mgr = SoundManager(parent=None, sounds_dir=tmp_path)
        mgr.set_enabled(False)
        mgr.play("click")
