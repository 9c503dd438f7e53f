from __future__ import annotations

import unittest

from mindful.audio.tone_engine import ToneEngine
from mindful.core.countdown import DURATION_CHOICES, TICK_INTERVAL_MS, CountdownController
from tests.helpers import FakeAudioBackend, qt_app


class CountdownTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = qt_app()

    def make(self, minutes: int = 2, sound: bool = True) -> CountdownController:
        self.backend = FakeAudioBackend()
        self.tones = ToneEngine(self.backend, enabled=sound)
        ctrl = CountdownController(self.tones, minutes=minutes)
        self.addCleanup(ctrl.shutdown)
        return ctrl


class TestDurations(CountdownTestCase):
    def test_initial_remaining_for_every_choice(self) -> None:
        for minutes in DURATION_CHOICES:
            ctrl = self.make(minutes)
            self.assertEqual(ctrl.remaining, minutes * 60)
            self.assertEqual(ctrl.total_seconds, minutes * 60)
            self.assertFalse(ctrl.active)

    def test_set_duration_while_idle(self) -> None:
        ctrl = self.make(5)
        ctrl.tick()
        self.assertTrue(ctrl.set_duration(10))
        self.assertEqual(ctrl.minutes, 10)
        self.assertEqual(ctrl.remaining, 600)

    def test_set_duration_rejected_while_running(self) -> None:
        ctrl = self.make(5)
        ctrl.start()
        self.assertFalse(ctrl.set_duration(10))
        self.assertEqual(ctrl.minutes, 5)
        self.assertEqual(ctrl.remaining, 300)

    def test_set_duration_rejects_unknown_value(self) -> None:
        ctrl = self.make(5)
        self.assertFalse(ctrl.set_duration(7))
        self.assertEqual(ctrl.minutes, 5)

    def test_constructor_rejects_unknown_value(self) -> None:
        with self.assertRaises(ValueError):
            CountdownController(ToneEngine(FakeAudioBackend()), minutes=4)


class TestTransitions(CountdownTestCase):
    def test_start_schedules_ticks_and_ambient(self) -> None:
        ctrl = self.make()
        self.assertTrue(ctrl.start())
        self.assertTrue(ctrl.active)
        self.assertTrue(ctrl.timer.isActive())
        self.assertEqual(ctrl.timer.interval(), TICK_INTERVAL_MS)
        self.assertTrue(self.tones.ambient_playing)

    def test_start_twice_keeps_one_ambient(self) -> None:
        ctrl = self.make()
        ctrl.start()
        self.assertFalse(ctrl.start())
        self.assertEqual(len(self.backend.opened), 1)

    def test_start_muted_has_no_ambient(self) -> None:
        ctrl = self.make(sound=False)
        ctrl.start()
        self.assertTrue(ctrl.active)
        self.assertEqual(self.backend.opened, [])

    def test_pause_keeps_remaining(self) -> None:
        ctrl = self.make()
        ctrl.start()
        for _ in range(5):
            ctrl.tick()

        self.assertTrue(ctrl.pause())

        self.assertFalse(ctrl.active)
        self.assertFalse(ctrl.timer.isActive())
        self.assertFalse(self.tones.ambient_playing)
        self.assertEqual(ctrl.remaining, 115)
        self.assertEqual(ctrl.sessions_completed, 0)

    def test_pause_when_idle_is_noop(self) -> None:
        ctrl = self.make()
        self.assertFalse(ctrl.pause())

    def test_toggle(self) -> None:
        ctrl = self.make()
        self.assertTrue(ctrl.toggle())
        self.assertFalse(ctrl.toggle())
        self.assertTrue(ctrl.toggle())

    def test_resume_after_pause(self) -> None:
        ctrl = self.make()
        ctrl.start()
        ctrl.tick()
        ctrl.pause()
        ctrl.start()
        self.assertEqual(ctrl.remaining, 119)
        self.assertEqual(len(self.backend.live), 1)

    def test_changed_signal(self) -> None:
        ctrl = self.make()
        seen = []
        ctrl.changed.connect(lambda: seen.append(ctrl.remaining))
        ctrl.start()
        ctrl.tick()
        self.assertEqual(seen, [120, 119])


class TestTick(CountdownTestCase):
    def test_tick_decrements_by_one(self) -> None:
        ctrl = self.make()
        ctrl.start()
        ctrl.tick()
        self.assertEqual(ctrl.remaining, 119)
        self.assertEqual(ctrl.elapsed, 1)

    def test_tick_never_negative(self) -> None:
        ctrl = self.make()
        for _ in range(200):
            ctrl.tick()
        self.assertEqual(ctrl.remaining, 0)

    def test_idle_countdown_to_zero_is_not_a_session(self) -> None:
        ctrl = self.make()
        for _ in range(120):
            ctrl.tick()
        self.assertEqual(ctrl.sessions_completed, 0)
        self.assertEqual(self.backend.chimes, [])

    def test_start_with_nothing_left_is_rejected(self) -> None:
        ctrl = self.make()
        for _ in range(120):
            ctrl.tick()
        self.assertFalse(ctrl.start())
        self.assertFalse(ctrl.active)


class TestScenarios(CountdownTestCase):
    def test_two_minute_session_completes_once(self) -> None:
        ctrl = self.make(2)
        completions = []
        ctrl.completed.connect(completions.append)

        ctrl.start()
        for _ in range(120):
            ctrl.tick()

        self.assertEqual(ctrl.remaining, 0)
        self.assertFalse(ctrl.active)
        self.assertFalse(ctrl.timer.isActive())
        self.assertEqual(ctrl.sessions_completed, 1)
        self.assertEqual(completions, [1])
        self.assertEqual(len(self.backend.chimes), 1)
        self.assertFalse(self.tones.ambient_playing)

        # stray ticks after completion change nothing
        ctrl.tick()
        self.assertEqual(ctrl.sessions_completed, 1)
        self.assertEqual(len(self.backend.chimes), 1)

    def test_reset_midway(self) -> None:
        ctrl = self.make(2)
        ctrl.start()
        for _ in range(30):
            ctrl.tick()
        self.assertEqual(ctrl.remaining, 90)

        ctrl.reset()

        self.assertEqual(ctrl.remaining, 120)
        self.assertFalse(ctrl.active)
        self.assertFalse(ctrl.timer.isActive())
        self.assertFalse(self.tones.ambient_playing)
        self.assertEqual(ctrl.sessions_completed, 0)
        self.assertEqual(self.backend.chimes, [])

    def test_counter_accumulates(self) -> None:
        ctrl = self.make(2)
        for _ in range(2):
            ctrl.reset()
            ctrl.start()
            for _ in range(120):
                ctrl.tick()
        self.assertEqual(ctrl.sessions_completed, 2)

        ctrl.reset()
        self.assertEqual(ctrl.sessions_completed, 2)

    def test_muted_completion_has_no_chime(self) -> None:
        ctrl = self.make(2, sound=False)
        ctrl.start()
        for _ in range(120):
            ctrl.tick()
        self.assertEqual(ctrl.sessions_completed, 1)
        self.assertEqual(self.backend.chimes, [])

    def test_sound_toggle_mid_session(self) -> None:
        ctrl = self.make(2)
        ctrl.start()

        self.assertFalse(ctrl.toggle_sound())
        self.assertFalse(ctrl.sound_enabled)
        self.assertFalse(self.tones.ambient_playing)

        self.assertTrue(ctrl.toggle_sound())
        self.assertTrue(self.tones.ambient_playing)
        self.assertEqual(len(self.backend.live), 1)

    def test_audio_failure_does_not_stop_countdown(self) -> None:
        ctrl = CountdownController(ToneEngine(FakeAudioBackend(fail=True)), minutes=2)
        self.addCleanup(ctrl.shutdown)
        with self.assertLogs("mindful.audio.tone_engine", level="WARNING"):
            ctrl.start()
            for _ in range(120):
                ctrl.tick()
        self.assertEqual(ctrl.sessions_completed, 1)

    def test_shutdown_closes_audio(self) -> None:
        ctrl = self.make(2)
        ctrl.start()
        ctrl.shutdown()
        self.assertFalse(ctrl.active)
        self.assertTrue(self.backend.closed)
        self.assertEqual(self.backend.live, [])


if __name__ == "__main__":
    unittest.main()
