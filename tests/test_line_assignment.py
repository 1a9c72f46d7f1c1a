import unittest
from collections import Counter

from core.domain import CorpusDataError, FlatWord, PreciseWord
from core.line_assignment import ApproximateLineAssignment, PreciseLineAssignment
from core.positioning import (
    APPROXIMATE_AVG_WORD_WIDTH,
    MARGIN_SIDE,
    PAGE_WIDTH,
    PRECISE_AVG_WORD_WIDTH,
)
from fakes import FATIHAH_AYAH_WORDS, flat_words_for, precise_words_for_lines


class TestPreciseLineAssignment(unittest.TestCase):

    def setUp(self):
        self.strategy = PreciseLineAssignment()

    def test_lines_come_from_corpus(self):
        words = precise_words_for_lines({
            2: [(2, 1, 1)],
            3: [(2, 2, 1), (2, 2, 2), (2, 2, 3)],
            9: [(2, 3, 1), (2, 3, 2)],
        })
        positioned = self.strategy.assign(words)

        self.assertEqual(len(positioned), len(words))
        self.assertEqual(Counter(w.line_number for w in positioned), Counter({2: 1, 3: 3, 9: 2}))

    def test_words_sorted_within_line(self):
        shuffled = [
            PreciseWord(word_index=2, surah=2, ayah=5, word=1, text="c", line_number=4),
            PreciseWord(word_index=0, surah=2, ayah=4, word=1, text="a", line_number=4),
            PreciseWord(word_index=1, surah=2, ayah=4, word=2, text="b", line_number=4),
        ]
        positioned = self.strategy.assign(shuffled)

        self.assertEqual([w.text for w in positioned], ["a", "b", "c"])
        xs = [w.position.x for w in positioned]
        self.assertEqual(xs, sorted(xs, reverse=True))

    def test_uses_precise_width(self):
        words = precise_words_for_lines({1: [(1, 1, 1)]})
        positioned = self.strategy.assign(words)

        self.assertEqual(positioned[0].position.width, PRECISE_AVG_WORD_WIDTH)
        self.assertEqual(positioned[0].position.x, PAGE_WIDTH - MARGIN_SIDE - PRECISE_AVG_WORD_WIDTH)

    def test_output_ordered_by_line(self):
        words = precise_words_for_lines({7: [(3, 1, 1)], 1: [(2, 286, 1)]})
        positioned = self.strategy.assign(list(reversed(words)))
        self.assertEqual([w.line_number for w in positioned], [1, 7])

    def test_rejects_line_outside_page(self):
        words = [PreciseWord(word_index=0, surah=1, ayah=1, word=1, text="x", line_number=16)]
        with self.assertRaises(CorpusDataError):
            self.strategy.assign(words)


class TestApproximateLineAssignment(unittest.TestCase):

    def setUp(self):
        self.strategy = ApproximateLineAssignment()

    def test_fatihah_distribution(self):
        words = flat_words_for(1, FATIHAH_AYAH_WORDS)
        self.assertEqual(len(words), 29)

        positioned = self.strategy.assign(words)
        per_line = ApproximateLineAssignment.words_per_line(len(words))

        self.assertEqual(per_line, 2)
        self.assertEqual(len(positioned), 29)
        for index, word in enumerate(positioned):
            self.assertEqual(word.word_index, index)
            self.assertEqual(word.line_number, min(index // per_line + 1, 15))

    def test_lines_stay_in_range(self):
        for count in (1, 14, 15, 16, 29, 139, 250):
            words = flat_words_for(2, [count])
            positioned = self.strategy.assign(words)
            self.assertEqual(len(positioned), count)
            for word in positioned:
                self.assertTrue(1 <= word.line_number <= 15)

    def test_line_for_index_is_clamped(self):
        self.assertEqual(ApproximateLineAssignment.line_for_index(100, 2), 15)
        self.assertEqual(ApproximateLineAssignment.line_for_index(0, 2), 1)

    def test_rtl_order_within_lines(self):
        positioned = self.strategy.assign(flat_words_for(2, [20, 17]))
        by_line = {}
        for word in positioned:
            by_line.setdefault(word.line_number, []).append(word.position.x)

        for xs in by_line.values():
            for left, right in zip(xs, xs[1:]):
                self.assertGreater(left, right)

    def test_uses_approximate_width(self):
        positioned = self.strategy.assign(flat_words_for(1, [1]))
        self.assertEqual(positioned[0].position.width, APPROXIMATE_AVG_WORD_WIDTH)
        self.assertEqual(positioned[0].position.x, PAGE_WIDTH - MARGIN_SIDE - APPROXIMATE_AVG_WORD_WIDTH)

    def test_duplicate_word_is_corpus_error(self):
        words = [
            FlatWord(surah=1, ayah=1, word=1, text="a"),
            FlatWord(surah=1, ayah=1, word=1, text="b"),
        ]
        with self.assertRaises(CorpusDataError):
            self.strategy.assign(words)


if __name__ == "__main__":
    unittest.main()
