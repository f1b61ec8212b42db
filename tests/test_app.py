"""Tests for the main window: loading exercises, editing, cues, window state."""

import pytest

from hiit.app import HiitApp
from hiit.audio.sounds import SoundManager
from hiit.database.library import ExerciseLibrary
from hiit.settings import Settings, load_settings
from hiit.timer import ExerciseSetup, ManualTickSource, Phase
from hiit.ui.exercise_editor import EditorRole

from helpers import run_to_completion


@pytest.fixture
def sources():
    return []


@pytest.fixture
def played():
    return []


@pytest.fixture
def library():
    lib = ExerciseLibrary()
    lib.add(ExerciseSetup(name="Burpees", exercise_seconds=2, rest_seconds=2, sets=2))
    lib.add(ExerciseSetup(name="Plank", exercise_seconds=5, rest_seconds=1, sets=1))
    return lib


@pytest.fixture
def app(qapp, tmp_path, library, sources, played):
    def make_source():
        src = ManualTickSource()
        sources.append(src)
        return src

    sounds = SoundManager(sounds_dir=tmp_path / "sounds")
    sounds.play = played.append
    window = HiitApp(
        settings=Settings(warmup_seconds=2),
        library=library,
        sound_manager=sounds,
        tick_source_factory=make_source,
    )
    yield window
    window._discard_timer()


class TestStartup:

    def test_lists_stored_exercises(self, app):
        assert [e.name for e in app.exercise_list.exercises()] == ["Burpees", "Plank"]

    def test_no_timer_until_loaded(self, app):
        assert app.timer is None
        assert app._stack.currentWidget() is app._placeholder


class TestLoadExercise:

    def test_load_starts_timer_with_global_warmup(self, app, library):
        burpees = library.list_exercises()[0]
        timer = app.load_exercise(burpees)
        assert timer.running
        assert timer.phase == Phase.WARMUP
        assert timer.definition.warmup_seconds == 2
        assert timer.definition.exercise_seconds == 2
        assert app._stack.currentWidget() is app._timer_widget

    def test_loading_again_discards_previous_timer(self, app, library, sources):
        burpees, plank = library.list_exercises()
        first = app.load_exercise(burpees)
        second = app.load_exercise(plank)
        assert first is not second
        assert not first.running
        assert sources[0].active_streams == 0
        assert sources[1].active_streams == 1

    def test_load_via_list_signal(self, app):
        app.exercise_list.select_row(1)
        app.exercise_list._load_btn.click()
        assert app.timer is not None
        assert app.timer.definition.sets == 1

    def test_toggle_and_reset(self, app, library, sources):
        timer = app.load_exercise(library.list_exercises()[0])
        app.toggle_timer()
        assert not timer.running
        app.toggle_timer()
        assert timer.running
        sources[-1].fire(3)
        app.reset_timer()
        assert timer.phase == Phase.WARMUP
        assert timer.remaining_seconds == 2


class TestEditing:

    def test_new_exercise_pauses_timer_and_saves(self, app, library, monkeypatch):
        timer = app.load_exercise(library.list_exercises()[0])
        roles = []

        def fake_editor(role, setup):
            roles.append(role)
            assert not timer.running
            return ExerciseSetup(name="Lunges", exercise_seconds=20, rest_seconds=5, sets=3)

        monkeypatch.setattr(app, "_run_editor", fake_editor)
        app.prompt_new_exercise()
        assert roles == [EditorRole.NEW]
        assert not timer.running
        assert [e.name for e in app.exercise_list.exercises()] == ["Burpees", "Plank", "Lunges"]

    def test_cancelled_editor_changes_nothing(self, app, monkeypatch):
        monkeypatch.setattr(app, "_run_editor", lambda role, setup: None)
        app.prompt_new_exercise()
        assert len(app.exercise_list.exercises()) == 2

    def test_edit_exercise(self, app, library, monkeypatch):
        plank = library.list_exercises()[1]
        monkeypatch.setattr(
            app, "_run_editor",
            lambda role, setup: ExerciseSetup(name="Side plank", sets=2, id=setup.id),
        )
        app.prompt_edit_exercise(plank)
        assert library.get(plank.id).name == "Side plank"
        assert app.exercise_list.exercises()[1].name == "Side plank"

    def test_remove_exercise(self, app, library):
        burpees = library.list_exercises()[0]
        app.remove_exercise(burpees)
        assert [e.name for e in app.exercise_list.exercises()] == ["Plank"]


class TestCueSounds:

    def test_full_workout_cues(self, app, library, sources, played):
        timer = app.load_exercise(library.list_exercises()[0])
        run_to_completion(timer, sources[-1])
        assert played.count("exercise_start") == 2
        assert played.count("rest_start") == 1
        assert played[-1] == "workout_complete"

    def test_countdown_beeps(self, app, library, sources, played):
        plank = library.list_exercises()[1]  # 5 s exercise
        app.load_exercise(plank)
        sources[-1].fire(2)                   # through the warm-up
        played.clear()
        sources[-1].fire(4)                   # 4, 3, 2, 1
        assert played == ["countdown", "countdown", "countdown"]

    def test_no_repeat_beep_on_resume(self, app, library, sources, played):
        timer = app.load_exercise(library.list_exercises()[1])
        sources[-1].fire(4)                   # exercise at 3 s
        before = played.count("countdown")
        timer.stop()
        timer.start()
        assert played.count("countdown") == before


class TestWindowState:

    def test_close_saves_geometry_and_releases_timer(self, app, library, sources, settings_path):
        app.load_exercise(library.list_exercises()[0])
        app.show()
        app.resize(800, 600)
        app.close()
        assert sources[-1].active_streams == 0
        saved = load_settings()
        assert saved.window_maximized is False
        assert saved.window_width == app.width()
        assert saved.window_height == app.height()

    def test_restores_size(self, qapp, tmp_path, library):
        sounds = SoundManager(sounds_dir=tmp_path / "sounds")
        window = HiitApp(
            settings=Settings(window_width=640, window_height=480),
            library=library,
            sound_manager=sounds,
            tick_source_factory=ManualTickSource,
        )
        assert (window.width(), window.height()) == (640, 480)
