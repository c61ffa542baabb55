import unittest
from shelver.planning.classifier import (
    Classification,
    NO_MATCH,
    STRATEGIES,
    classify,
    get_stem,
    match_marker,
    match_numeric,
    strip_separators,
)


class TestNumericMode(unittest.TestCase):
    def assertGroups(self, cases, marker=""):
        for filename, expected in cases:
            with self.subTest(filename=filename, marker=marker):
                result = classify(filename, marker)
                self.assertEqual(result.group, expected)
                self.assertEqual(bool(result), expected is not None)

    def test_numeric_suffixes(self):
        self.assertGroups([
            ("album-001.wav", "album"),
            ("album-01.wav", "album"),
            ("my_album_123.mp3", "my_album"),
            ("album.002.wav", "album"),
            ("album 003.wav", "album"),
            ("my-album_mix.004.wav", "my-album_mix"),
            ("写真-001.jpg", "写真"),
            ("my photo album 99.jpg", "my photo album"),
            ("test-123456789012345.txt", "test"),
        ])

    def test_single_digit_never_matches(self):
        """Single-digit suffixes are ordinary names, not sequence numbers."""
        self.assertGroups([
            ("album-1.wav", None),
            ("file_9.txt", None),
        ])

    def test_no_numeric_suffix(self):
        self.assertGroups([
            ("album.wav", None),
            ("test123file.txt", None),
        ])

    def test_degenerate_names(self):
        self.assertGroups([
            ("", None),
            (".txt", None),
            (".01", None),
        ])

    def test_all_digit_stems(self):
        """The head is the shortest possible, so one leading digit is kept."""
        self.assertGroups([
            ("123.txt", "1"),
            ("2024.jpg", "2"),
            ("12.txt", None),
        ])

    def test_separator_runs_are_stripped(self):
        self.assertGroups([
            ("test---___...   99.txt", "test"),
            ("a99.txt", "a"),
        ])

    def test_group_empty_after_strip_fails(self):
        self.assertIsNone(match_numeric("-01"))
        self.assertIsNone(match_numeric("__001"))

    def test_minimal_head_keeps_longest_tail(self):
        # "10-20": head "1", tail "0-20" is not separators+digits; first valid head is "10"
        self.assertEqual(match_numeric("10-20"), "10")
        self.assertEqual(match_numeric("v2-0001"), "v2")

    def test_no_extension(self):
        self.assertEqual(classify("track_07").group, "track")


class TestMarkerMode(unittest.TestCase):
    def assertGroups(self, cases, marker):
        for filename, expected in cases:
            with self.subTest(filename=filename, marker=marker):
                self.assertEqual(classify(filename, marker).group, expected)

    def test_marker_with_separators(self):
        self.assertGroups([
            ("kyoto-trip p04.jpg", "kyoto-trip"),
            ("album p99.wav", "album"),
            ("data_p123.csv", "data"),
            ("files-p45.txt", "files"),
            ("image.p88.jpg", "image"),
        ], "p")

    def test_multi_character_marker(self):
        self.assertGroups([("report page12.pdf", "report")], "page")

    def test_marker_allows_trailing_content(self):
        self.assertEqual(match_marker("scan p07 final", "p"), "scan")

    def test_marker_mode_reported(self):
        result = classify("kyoto-trip p04.jpg", "p")
        self.assertEqual(result, Classification(group="kyoto-trip", mode="marker"))

    def test_marker_wins_over_numeric(self):
        result = classify("test-p01-02.txt", "p")
        self.assertEqual(result.group, "test")
        self.assertEqual(result.mode, "marker")

    def test_marker_inside_word_falls_back_to_numeric(self):
        for filename, expected in [("sp02.jpg", "sp"), ("albump99.wav", "albump")]:
            with self.subTest(filename=filename):
                result = classify(filename, "p")
                self.assertEqual(result.group, expected)
                self.assertEqual(result.mode, "numeric")

    def test_boundary_miss_is_not_retried(self):
        self.assertIsNone(match_marker("sp02", "p"))

    def test_separator_run_before_marker(self):
        # Extra separators in front of the marker stay in the head and are stripped
        self.assertEqual(match_marker("a--p99", "p"), "a")

    def test_marker_not_found_falls_back(self):
        result = classify("album-001.wav", "p")
        self.assertEqual(result.group, "album")
        self.assertEqual(result.mode, "numeric")

    def test_single_digit_after_marker(self):
        self.assertEqual(classify("album p1.wav", "p"), NO_MATCH)

    def test_marker_at_start_of_name(self):
        # No head before the marker, so numeric mode decides
        self.assertEqual(classify("p123.txt", "p"), Classification(group="p", mode="numeric"))
        self.assertEqual(classify("p-p99.txt", "p"), Classification(group="p", mode="marker"))

    def test_marker_matched_literally(self):
        self.assertEqual(classify("test-.*+99.txt", ".*+").group, "test")
        self.assertEqual(classify("test-[special]99.txt", "[special]").group, "test")
        self.assertEqual(classify("test-(a|b)99.txt", "(a|b)").group, "test")

    def test_empty_marker_disables_marker_mode(self):
        self.assertIsNone(match_marker("kyoto-trip p04", ""))
        self.assertEqual(classify("kyoto-trip p04.jpg", "").group, "kyoto-trip p")


class TestHelpers(unittest.TestCase):
    def test_get_stem(self):
        self.assertEqual(get_stem("album-001.wav"), "album-001")
        self.assertEqual(get_stem("archive.tar.gz"), "archive.tar")
        self.assertEqual(get_stem("README"), "README")
        self.assertEqual(get_stem(".txt"), "")

    def test_strip_separators_only_trailing(self):
        self.assertEqual(strip_separators("a-b_c. -_"), "a-b_c")
        self.assertEqual(strip_separators("---"), "")

    def test_strategy_order(self):
        self.assertEqual([name for name, _ in STRATEGIES], ["marker", "numeric"])

    def test_reclassifying_destination_name_is_stable(self):
        for filename, marker in [("album-001.wav", ""), ("kyoto-trip p04.jpg", "p"), ("sp02.jpg", "p")]:
            with self.subTest(filename=filename):
                first = classify(filename, marker)
                dest_name = f"{first.group}/{filename}".split("/")[-1]
                self.assertEqual(classify(dest_name, marker), first)

    def test_no_match_is_falsy(self):
        self.assertFalse(NO_MATCH)
        self.assertFalse(NO_MATCH.matched)
        self.assertIsNone(NO_MATCH.group)


if __name__ == "__main__":
    unittest.main()
