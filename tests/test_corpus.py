"""
Tests for corpus reading and normalization.
"""

import tempfile
import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_markov.corpus import CorpusConfig, normalize_corpus, read_corpus


class TestNormalizeCorpus(unittest.TestCase):

    def test_default_keeps_raw_text(self):
        text = "Héllo,\n  World!"
        self.assertEqual(normalize_corpus(text), text)

    def test_lowercase(self):
        self.assertEqual(normalize_corpus("ABC", CorpusConfig(lowercase=True)), "abc")

    def test_strip_accents(self):
        cfg = CorpusConfig(strip_accents=True)
        self.assertEqual(normalize_corpus("café naïve", cfg), "cafe naive")

    def test_normalize_whitespace(self):
        cfg = CorpusConfig(normalize_whitespace=True)
        self.assertEqual(normalize_corpus("  a \n\t b  ", cfg), "a b")


class TestReadCorpus(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_reads_full_text(self):
        path = self.dir / "corpus.txt"
        path.write_bytes("line one\r\nline two\n".encode("utf-8"))
        self.assertEqual(read_corpus(path), "line one\r\nline two\n")

    def test_reads_with_encoding(self):
        path = self.dir / "latin.txt"
        path.write_bytes("déjà vu".encode("latin-1"))
        self.assertEqual(read_corpus(path, encoding="latin-1"), "déjà vu")

    def test_applies_config(self):
        path = self.dir / "corpus.txt"
        path.write_text("Ça  Va", encoding="utf-8")
        cfg = CorpusConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual(read_corpus(path, config=cfg), "ca va")

    def test_empty_file_warns(self):
        path = self.dir / "empty.txt"
        path.write_text("", encoding="utf-8")
        with self.assertLogs("char_markov.corpus", level="WARNING"):
            self.assertEqual(read_corpus(path), "")

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_corpus(self.dir / "missing.txt")


if __name__ == "__main__":
    unittest.main()
