"""
Tests for the Matplotlib presentation, on the non-interactive Agg backend.
"""

from unittest import TestCase, main

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402

from slide2048.utils.windows import WindowBoard  # noqa: E402


class TestWindowBoard(TestCase):
    def setUp(self):
        self.window = WindowBoard(title="2048 Game", size=4)

    def tearDown(self):
        self.window.close()

    def test_show_image(self):
        """Tiles, scores, merges and messages are drawn."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 0] = 4
        board[3, 2] = 2048
        self.window.show_image(board, merged_positions={(0, 0)}, score=12, best_score=40, message="You win!")

        self.assertEqual(self.window.texts[0].get_text(), "4")
        self.assertEqual(self.window.texts[14].get_text(), "2048")
        self.assertEqual(self.window.texts[1].get_text(), "")
        self.assertEqual(self.window.header.get_text(), "Score: 12    Best: 40")
        self.assertEqual(self.window.message.get_text(), "You win!")

        # ##>: Only the merged cell gets the thick border.
        self.assertEqual(self.window.axes[0].spines["top"].get_linewidth(), 3.0)
        self.assertEqual(self.window.axes[1].spines["top"].get_linewidth(), 0.8)

    def test_close(self):
        self.window.close()
        self.assertTrue(self.window.closed)


if __name__ == "__main__":
    main()
