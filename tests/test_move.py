from unittest import TestCase, main

from numpy import array

from slide2048.addons.types import Direction
from slide2048.core.gamemove import legal_directions, legal_directions_mask


class TestGameMove(TestCase):
    def test_legal_directions(self):
        """
        Test if the directions changing the board are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_legal_directions_mask(self):
        """
        Test the mask order (left, up, right, down).
        """
        board = array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [4, 8, 0, 0]])
        self.assertEqual(legal_directions_mask(board), (False, True, True, False))

    def test_no_legal_direction(self):
        """
        Test that a finished board allows no move.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])


if __name__ == '__main__':
    main()
