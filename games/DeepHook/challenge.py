"""
DeepHook - Trivia gate opened by catching a challenge token.

    CLOSED --token caught--> OPEN --answer--> RESOLVED --delay elapsed--> CLOSED

While OPEN or RESOLVED the rest of the simulation is paused. The return
to CLOSED is a wall-clock deadline set when the answer is given, so it
fires even though nothing else advances.
"""
import random
import time
from typing import Callable, Optional

from deephook.logging import get_logger
from models.deephook import ChallengeDeck, ChallengeState, ChallengeView, TriviaQuestion
from games.DeepHook.economy import Wallet

log = get_logger('challenge')


class ChallengeController:
    """Presents questions from a deck and settles the reward."""

    def __init__(
        self,
        deck: ChallengeDeck,
        reward: int,
        result_seconds: float,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the controller.

        Args:
            deck: Question content
            reward: Amount credited for a correct answer
            result_seconds: How long the result stays up before closing
            rng: Random source for picking questions
            clock: Monotonic time source in seconds
        """
        self.deck = deck
        self.reward = reward
        self.result_seconds = result_seconds
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock

        self.state = ChallengeState.CLOSED
        self.question: Optional[TriviaQuestion] = None
        self.selected_index: Optional[int] = None
        self.correct: Optional[bool] = None
        self._close_at: Optional[float] = None

    @property
    def is_paused(self) -> bool:
        return self.state.pauses_simulation

    def open(self) -> bool:
        """Present a random question from the deck.

        Returns:
            True if opened, False if a challenge is already in progress
        """
        if self.state is not ChallengeState.CLOSED:
            return False

        self.question = self.deck.questions[self._rng.randrange(len(self.deck.questions))]
        self.selected_index = None
        self.correct = None
        self.state = ChallengeState.OPEN
        log.info("Challenge opened: %s", self.question.prompt)
        return True

    def answer(self, option_index: int, wallet: Wallet) -> bool:
        """Settle the open question.

        Args:
            option_index: Index of the chosen option
            wallet: Credited with the reward on a correct answer

        Returns:
            True if the answer was accepted; False when no question is
            open or the index is out of range
        """
        if self.state is not ChallengeState.OPEN or self.question is None:
            return False
        if not 0 <= option_index < len(self.question.options):
            log.debug("Ignoring out-of-range answer %d", option_index)
            return False

        self.selected_index = option_index
        self.correct = option_index == self.question.correct_index
        if self.correct:
            wallet.credit(self.reward)

        self.state = ChallengeState.RESOLVED
        self._close_at = self._clock() + self.result_seconds
        log.info("Challenge answered %s", "correctly" if self.correct else "incorrectly")
        return True

    def update(self) -> bool:
        """Fire the deferred close if its deadline has passed.

        Returns:
            True if the challenge closed during this call
        """
        if self.state is not ChallengeState.RESOLVED or self._close_at is None:
            return False
        if self._clock() < self._close_at:
            return False

        self.state = ChallengeState.CLOSED
        self.question = None
        self._close_at = None
        log.debug("Challenge closed, simulation resumes")
        return True

    def view(self) -> Optional[ChallengeView]:
        """Snapshot of the gate while it is Open or Resolved."""
        if self.state is ChallengeState.CLOSED or self.question is None:
            return None
        return ChallengeView(
            state=self.state,
            prompt=self.question.prompt,
            options=list(self.question.options),
            selected_index=self.selected_index,
            correct=self.correct,
            reward=self.reward,
        )
