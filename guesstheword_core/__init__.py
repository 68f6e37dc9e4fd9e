"""
Guess The Word core Python package.

State holder for a single-screen word-guessing game: a shuffled word queue,
a score, a 60-second countdown and a one-shot game-over event, all exposed as
observable values for whatever presentation layer drives the game.
Modules:
- config.py: vocabulary, timing constants, logging settings
- observable.py: Observable, DerivedObservable
- words.py: WordQueue, Hint
- timer.py: CountdownTimer, TimerCallbacks
- scheduling.py: Scheduler protocol, ManualScheduler
- session.py: GameSession
"""
