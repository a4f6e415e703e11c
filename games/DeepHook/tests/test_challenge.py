"""
Tests for the trivia gate and YAML challenge deck loading.
"""

import random

import pytest
import yaml

from models.deephook import ChallengeState
from games.DeepHook.challenge import ChallengeController
from games.DeepHook.challenge_loader import ChallengeDeckLoader
from games.DeepHook.economy import Wallet


VALID_DECK = """
id: sample
name: Sample Deck
questions:
  - prompt: Pick B
    options: [A, B]
    correct_index: 1
"""


class TestChallengeController:
    """Test the Closed -> Open -> Resolved -> Closed cycle."""

    def _controller(self, deck, clock, reward=50, result_seconds=2.0):
        return ChallengeController(deck, reward=reward, result_seconds=result_seconds,
                                   rng=random.Random(0), clock=clock)

    def test_starts_closed(self, deck, clock):
        """Test a fresh controller does not pause anything."""
        controller = self._controller(deck, clock)
        assert controller.state is ChallengeState.CLOSED
        assert not controller.is_paused
        assert controller.view() is None

    def test_open_presents_question(self, deck, clock):
        """Test opening picks a question from the deck and pauses."""
        controller = self._controller(deck, clock)
        assert controller.open() is True
        assert controller.state is ChallengeState.OPEN
        assert controller.is_paused
        view = controller.view()
        assert view.prompt == '2 + 2?'
        assert view.options == ['3', '4', '5']
        assert view.selected_index is None

    def test_open_twice_refused(self, deck, clock):
        """Test a second token cannot reopen a gate in progress."""
        controller = self._controller(deck, clock)
        controller.open()
        assert controller.open() is False

    def test_correct_answer_rewards(self, deck, clock):
        """Test a correct answer credits the reward and resolves."""
        controller = self._controller(deck, clock)
        wallet = Wallet()
        controller.open()
        assert controller.answer(1, wallet) is True
        assert controller.state is ChallengeState.RESOLVED
        assert controller.correct is True
        assert wallet.balance == 50
        assert controller.view().selected_index == 1

    def test_wrong_answer_pays_nothing(self, deck, clock):
        """Test a wrong answer resolves without a reward."""
        controller = self._controller(deck, clock)
        wallet = Wallet()
        controller.open()
        controller.answer(0, wallet)
        assert controller.correct is False
        assert wallet.balance == 0

    def test_out_of_range_answer_ignored(self, deck, clock):
        """Test an invalid option index leaves the question open."""
        controller = self._controller(deck, clock)
        controller.open()
        assert controller.answer(7, Wallet()) is False
        assert controller.answer(-1, Wallet()) is False
        assert controller.state is ChallengeState.OPEN

    def test_answer_when_closed_ignored(self, deck, clock):
        """Test answering without an open question does nothing."""
        controller = self._controller(deck, clock)
        wallet = Wallet()
        assert controller.answer(1, wallet) is False
        assert wallet.balance == 0

    def test_resolved_closes_after_delay(self, deck, clock):
        """Test the result stays up for the configured time, then closes."""
        controller = self._controller(deck, clock)
        controller.open()
        controller.answer(1, Wallet())

        clock.advance(1.9)
        assert controller.update() is False
        assert controller.state is ChallengeState.RESOLVED

        clock.advance(0.2)
        assert controller.update() is True
        assert controller.state is ChallengeState.CLOSED
        assert not controller.is_paused
        assert controller.view() is None

    def test_update_does_nothing_while_open(self, deck, clock):
        """Test an unanswered question never times out."""
        controller = self._controller(deck, clock)
        controller.open()
        clock.advance(1000.0)
        assert controller.update() is False
        assert controller.state is ChallengeState.OPEN


class TestChallengeDeckLoader:
    """Test YAML deck discovery and validation."""

    def test_default_deck_loads(self):
        """Test the deck shipped with the game."""
        loader = ChallengeDeckLoader()
        deck = loader.load_deck('ocean_facts')
        assert deck.id == 'ocean_facts'
        assert deck.name == 'Ocean Facts'
        assert len(deck.questions) == 8
        assert 'ocean_facts' in loader.list_available_decks()

    def test_load_custom_deck(self, tmp_path):
        """Test loading a deck from a custom directory."""
        (tmp_path / 'sample.yaml').write_text(VALID_DECK)
        loader = ChallengeDeckLoader(tmp_path)
        deck = loader.load_deck('sample')
        assert deck.name == 'Sample Deck'
        assert deck.description == ''
        assert deck.questions[0].correct_index == 1

    def test_missing_deck(self, tmp_path):
        """Test that an absent file raises FileNotFoundError."""
        loader = ChallengeDeckLoader(tmp_path)
        assert loader.deck_exists('nope') is False
        with pytest.raises(FileNotFoundError):
            loader.load_deck('nope')

    def test_invalid_deck_wrapped_in_value_error(self, tmp_path):
        """Test that validation errors name the offending file."""
        (tmp_path / 'bad.yaml').write_text(VALID_DECK.replace('correct_index: 1', 'correct_index: 5'))
        with pytest.raises(ValueError) as exc_info:
            ChallengeDeckLoader(tmp_path).load_deck('bad')
        assert 'bad.yaml' in str(exc_info.value)

    def test_non_mapping_rejected(self, tmp_path):
        """Test that a YAML list is not accepted as a deck."""
        (tmp_path / 'list.yaml').write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            ChallengeDeckLoader(tmp_path).load_deck('list')

    def test_malformed_yaml(self, tmp_path):
        """Test that broken YAML syntax raises YAMLError."""
        (tmp_path / 'broken.yaml').write_text("id: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            ChallengeDeckLoader(tmp_path).load_deck('broken')

    def test_list_available_decks_sorted(self, tmp_path):
        """Test deck ids are listed alphabetically."""
        for name in ('zeta', 'alpha', 'mid'):
            (tmp_path / f'{name}.yaml').write_text(VALID_DECK)
        assert ChallengeDeckLoader(tmp_path).list_available_decks() == ['alpha', 'mid', 'zeta']

    def test_missing_directory_lists_nothing(self, tmp_path):
        """Test a nonexistent decks directory yields no decks."""
        assert ChallengeDeckLoader(tmp_path / 'absent').list_available_decks() == []
