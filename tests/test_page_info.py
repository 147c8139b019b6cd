import unittest

from threadboard.pagination.page_info import build_page_info, finalize_edges
from threadboard.pagination.range_query import build_comment_range


def _edges(*cursors):
    return [{"cursor": c, "node": {"id": i}} for i, c in enumerate(cursors, start=1)]


class TestBuildPageInfo(unittest.TestCase):
    def test_empty_page(self):
        info = build_page_info([], False, build_comment_range(1, first=2))
        self.assertEqual(info, {
            "start_cursor": None,
            "end_cursor": None,
            "has_next_page": False,
            "has_prev_page": False,
        })

    def test_forward_with_more_rows(self):
        info = build_page_info(_edges("a", "b"), True, build_comment_range(1, first=2))
        self.assertEqual(info["start_cursor"], "a")
        self.assertEqual(info["end_cursor"], "b")
        self.assertTrue(info["has_next_page"])
        self.assertFalse(info["has_prev_page"])

    def test_backward_with_more_rows(self):
        info = build_page_info(_edges("c", "b"), True, build_comment_range(1, last=2))
        self.assertFalse(info["has_next_page"])
        self.assertTrue(info["has_prev_page"])
        # cursors follow fetch order, newest first
        self.assertEqual(info["start_cursor"], "c")
        self.assertEqual(info["end_cursor"], "b")

    def test_unbounded_never_has_more_pages(self):
        info = build_page_info(_edges("a"), True, build_comment_range(1))
        self.assertFalse(info["has_next_page"])
        self.assertFalse(info["has_prev_page"])


class TestFinalizeEdges(unittest.TestCase):
    def test_backward_edges_are_reversed(self):
        edges = _edges("c", "b", "a")
        result = finalize_edges(edges, build_comment_range(1, last=3))
        self.assertEqual([e["cursor"] for e in result], ["a", "b", "c"])
        self.assertEqual([e["cursor"] for e in edges], ["c", "b", "a"])

    def test_forward_edges_keep_order(self):
        edges = _edges("a", "b")
        result = finalize_edges(edges, build_comment_range(1, first=3))
        self.assertEqual([e["cursor"] for e in result], ["a", "b"])


if __name__ == "__main__":
    unittest.main()
