"""
Tests for the persistence collaborators.
"""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import TestCase, main

import numpy as np

from slide2048.addons.exceptions import CorruptSaveError
from slide2048.envs.board_engine import BoardEngine
from slide2048.storage.store import JsonFileStore, MemoryStore, SavedGame

GRID = [[2, 4, 0, 0], [0, 0, 0, 0], [0, 8, 0, 0], [0, 0, 0, 2048]]


class TestSavedGame(TestCase):
    """Test validation of saved records."""

    def test_round_trip(self):
        game = SavedGame(grid=GRID, score=120, won=True)
        self.assertEqual(SavedGame.from_dict(game.to_dict()), game)

    def test_missing_won_defaults_to_false(self):
        game = SavedGame.from_dict({'grid': GRID, 'score': 0})
        self.assertFalse(game.won)

    def test_invalid_records(self):
        invalid = [
            None,
            [],
            {'score': 0},
            {'grid': GRID[:3], 'score': 0},
            {'grid': [[2, 4, 0], *GRID[1:]], 'score': 0},
            {'grid': [[2, -4, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': [[2, 4.5, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': [[True, 0, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': [[3, 0, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': [[1, 0, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': [[2**70, 0, 0, 0], *GRID[1:]], 'score': 0},
            {'grid': GRID, 'score': -1},
            {'grid': GRID, 'score': '10'},
            {'grid': GRID, 'score': 0, 'won': 'yes'},
        ]
        for data in invalid:
            with self.subTest(data=data), self.assertRaises(CorruptSaveError):
                SavedGame.from_dict(data)


class TestMemoryStore(TestCase):
    def test_defaults(self):
        store = MemoryStore()
        self.assertIsNone(store.load())
        self.assertEqual(store.load_best_score(), 0)
        self.assertTrue(store.load_auto_save(True))
        self.assertFalse(store.load_auto_save(False))

    def test_save_and_load(self):
        store = MemoryStore()
        self.assertTrue(store.save(SavedGame(grid=GRID, score=4)))
        self.assertEqual(store.load(), SavedGame(grid=GRID, score=4))


class TestJsonFileStore(TestCase):
    """Test the JSON document store."""

    def setUp(self):
        self._directory = TemporaryDirectory()
        self.path = Path(self._directory.name) / 'nested' / 'state.json'
        self.store = JsonFileStore(self.path)

    def tearDown(self):
        self._directory.cleanup()

    def test_missing_file(self):
        self.assertIsNone(self.store.load())
        self.assertEqual(self.store.load_best_score(), 0)
        self.assertTrue(self.store.load_auto_save(True))

    def test_records_are_independent(self):
        self.assertTrue(self.store.save(SavedGame(grid=GRID, score=64, won=True)))
        self.assertTrue(self.store.save_best_score(512))
        self.assertTrue(self.store.save_auto_save(False))

        reopened = JsonFileStore(self.path)
        self.assertEqual(reopened.load(), SavedGame(grid=GRID, score=64, won=True))
        self.assertEqual(reopened.load_best_score(), 512)
        self.assertFalse(reopened.load_auto_save(True))

        with self.path.open(encoding='utf-8') as handler:
            document = json.load(handler)
        self.assertEqual(set(document), {'game', 'best_score', 'auto_save'})

    def test_malformed_json(self):
        """A broken document reads as an empty store."""
        self.path.parent.mkdir(parents=True)
        self.path.write_text('{"game": ', encoding='utf-8')
        self.assertIsNone(self.store.load())
        self.assertEqual(self.store.load_best_score(), 0)

    def test_corrupt_game(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text(json.dumps({'game': {'grid': 'x', 'score': 1}, 'best_score': 'a'}), encoding='utf-8')
        self.assertIsNone(self.store.load())
        self.assertEqual(self.store.load_best_score(), 0)

    def test_unavailable_storage(self):
        """Write failures are reported, never raised."""
        blocker = Path(self._directory.name) / 'file'
        blocker.write_text('', encoding='utf-8')
        store = JsonFileStore(blocker / 'state.json')

        self.assertFalse(store.save(SavedGame(grid=GRID, score=0)))
        self.assertFalse(store.available)
        self.assertIsNone(store.load())

    def test_engine_round_trip(self):
        """A game saved by one engine is resumed by the next one."""
        engine = BoardEngine(seed=4, store=self.store)
        engine._grid = np.array(GRID[:3] + [[0, 0, 2, 2]])
        engine.move('right')

        resumed = BoardEngine(seed=9, store=JsonFileStore(self.path))
        np.testing.assert_array_equal(resumed.grid, engine.grid)
        self.assertEqual(resumed.score, engine.score)
        self.assertEqual(resumed.best_score, 4)

    def test_engine_with_unavailable_storage(self):
        blocker = Path(self._directory.name) / 'file'
        blocker.write_text('', encoding='utf-8')
        engine = BoardEngine(seed=4, store=JsonFileStore(blocker / 'state.json'))

        self.assertTrue(engine.auto_save)
        self.assertFalse(engine.auto_save_available)
        self.assertEqual(np.count_nonzero(engine.grid), 2)


if __name__ == '__main__':
    main()
