import unittest

from game import (
    VOCABULARY,
    ManualScheduler,
    SessionState,
    new_game,
)


class TestGuessTheWordBasics(unittest.TestCase):
    def test_full_round_with_acknowledgement(self):
        sched = ManualScheduler()
        game = new_game(scheduler=sched, seed=2024)
        finished_events = []
        game.finished.subscribe(finished_events.append, emit_current=False)

        guessed = []
        for second in range(60):
            guessed.append(game.word.value)
            if second % 3 == 0:
                game.skip()
            else:
                game.correct()
            sched.advance(1)

        self.assertEqual(game.score.value, 40 - 20)
        self.assertEqual(game.remaining_time.value, 0)
        self.assertEqual(game.time_display.value, "00:00")
        self.assertEqual(finished_events, [True])
        self.assertTrue(all(w in VOCABULARY for w in guessed))
        self.assertEqual(game.refills, 2)

        game.acknowledge_finish()
        self.assertEqual(finished_events, [True, False])
        self.assertEqual(game.state, SessionState.ACKNOWLEDGED)
        game.dispose()

    def test_seeded_games_deal_identically(self):
        a = new_game(scheduler=ManualScheduler(), seed=3)
        b = new_game(scheduler=ManualScheduler(), seed=3)
        for _ in range(30):
            self.assertEqual(a.word.value, b.word.value)
            self.assertEqual(a.hint.value, b.hint.value)
            a.correct()
            b.correct()
        a.dispose()
        b.dispose()

    def test_new_game_replaces_finished_one(self):
        sched = ManualScheduler()
        old = new_game(scheduler=sched)
        sched.advance(60)
        old.dispose()
        fresh = new_game(scheduler=sched)
        self.assertEqual(fresh.remaining_time.value, 60)
        self.assertEqual(fresh.score.value, 0)
        self.assertFalse(fresh.finished.value)
        self.assertEqual(old.state, SessionState.FINISHED)
        fresh.dispose()


if __name__ == "__main__":
    unittest.main()
