import unittest

import pathstar as ps


class TestFrontier(unittest.TestCase):
    def test_lowest_priority_first(self):
        frontier = ps.search.Frontier()
        frontier.push("c", 3)
        frontier.push("a", 1)
        frontier.push("b", 2)
        self.assertEqual([frontier.pop() for _ in range(3)], ["a", "b", "c"])

    def test_ties_first_in_first_out(self):
        frontier = ps.search.Frontier()
        for node in ["x", "y", "z", "w"]:
            frontier.push(node, 1)
        frontier.push("first", 0)
        self.assertEqual(
            [frontier.pop() for _ in range(5)], ["first", "x", "y", "z", "w"]
        )

    def test_unorderable_nodes(self):
        frontier = ps.search.Frontier()
        frontier.push({"id": 1}.items(), 1)
        frontier.push(object(), 1)
        self.assertEqual(len(frontier), 2)
        frontier.pop()
        frontier.pop()

    def test_duplicates_and_length(self):
        frontier = ps.search.Frontier()
        self.assertFalse(frontier)
        frontier.push("a", 2)
        frontier.push("a", 1)
        self.assertTrue(frontier)
        self.assertEqual(len(frontier), 2)
        self.assertEqual(frontier.pop(), "a")
        self.assertEqual(frontier.pop(), "a")
        self.assertFalse(frontier)

    def test_pop_empty(self):
        with self.assertRaises(IndexError):
            ps.search.Frontier().pop()
